"""Level editor tools: placing, moving and deleting tiles with the mouse."""

from __future__ import annotations

from .actors import Actor, ActorType, DirtTile, GrassTile, PanelEditor, load_sprite
from .buttons import COOLDOWN_TICKS, StaticButton

EDITOR_ASSETS = "assets/editor"
PANEL_WIDTH = 300
_TOOL_TYPES = (ActorType.BUTTONS_STATIC, ActorType.BASE_PANEL)


def _editor_sprite(name: str):
    return load_sprite(f"{EDITOR_ASSETS}/{name}.png")


def _snap(value: int, size: int) -> int:
    """Align ``value`` to a grid of ``size``.

    Negative values keep the editor's grid rule: the truncated remainder is
    removed and one more cell is subtracted.
    """
    if size <= 0:
        return value
    if value >= 0:
        return value - value % size
    remainder = -((-value) % size)
    return value - remainder - size


class GameEditor:
    """Mouse-driven editing of the actors in a game's scene."""

    def __init__(self, game) -> None:
        self.game = game
        self.hand_active = False
        self.taking = False
        self.moving = False
        self.deleting = False
        self.active_panel = False
        self._pressed = False
        self._wait_ticks = 0
        self._waiting = False

        self.panel = PanelEditor(0, 0, _editor_sprite("base"), game)
        self.delete_button = StaticButton(
            35, 30, 0, game, _editor_sprite("delete_false"), _editor_sprite("delete_true")
        )
        self.move_button = StaticButton(
            165, 30, 1, game, _editor_sprite("take_false"), _editor_sprite("take_true")
        )
        self.grass_button = StaticButton(
            35, 120, 2, game, _editor_sprite("grass_false"), _editor_sprite("grass_true")
        )
        self.dirt_button = StaticButton(
            165, 120, 3, game, _editor_sprite("dirt_false"), _editor_sprite("dirt_true")
        )
        self.block1_button = StaticButton(
            35, 235, 4, game, _editor_sprite("bb1_f"), _editor_sprite("bb1_v")
        )
        self.block2_button = StaticButton(
            105, 235, 5, game, _editor_sprite("bb2_f"), _editor_sprite("bb2_v")
        )

    @property
    def tools(self) -> tuple[Actor, ...]:
        """The panel and buttons shown while the tool panel is open."""
        return (
            self.panel,
            self.grass_button,
            self.dirt_button,
            self.delete_button,
            self.move_button,
        )

    def _touches_panel(self, mx: int) -> bool:
        camera = self.game.control_manager.camera
        return self.active_panel and mx < camera.left + PANEL_WIDTH

    def _tick_cooldown(self) -> None:
        if self._waiting and self._wait_ticks < COOLDOWN_TICKS:
            self._wait_ticks += 1
        else:
            self._wait_ticks = 0
            self._waiting = False

    def _register_click(self) -> None:
        self._pressed = True
        self._waiting = True

    @staticmethod
    def _under_mouse(actor: Actor, mx: int, my: int) -> bool:
        return (
            actor.x <= mx <= actor.x + actor.width
            and actor.y <= my <= actor.y + actor.height
        )

    @staticmethod
    def _move_to(actor: Actor, mx: int, my: int) -> None:
        actor.x = _snap(mx, actor.width)
        actor.y = _snap(my, actor.width)

    def _overlaps_same_kind(self, actor: Actor) -> bool:
        return any(
            other is not actor
            and other.actor_type == actor.actor_type
            and other.x == actor.x
            and other.y == actor.y
            for other in self.game.actor_manager
        )

    def take_actor(self, actor: Actor) -> None:
        """Pick ``actor`` up on a click, or carry it and drop it on a free cell."""
        mx, my = self.game.mouse_world_position()
        if not actor.taken and not self.hand_active:
            if self._under_mouse(actor, mx, my):
                if self.game.mouse_pressed and not self._touches_panel(mx):
                    self._move_to(actor, mx, my)
                    actor.taken = True
                    self.hand_active = True
                    self._register_click()
                else:
                    self._pressed = False
            self._tick_cooldown()
        elif actor.taken:
            self._move_to(actor, mx, my)
            blocked = self._overlaps_same_kind(actor)
            if self.game.mouse_pressed and not blocked and not self._touches_panel(mx):
                actor.taken = False
                self.hand_active = False
                self._register_click()
            else:
                self._pressed = False
            self._tick_cooldown()

    def destroy_actor(self, actor: Actor) -> None:
        """Destroy ``actor`` when it is clicked while nothing is being carried."""
        if actor.taken or self.hand_active:
            return
        mx, my = self.game.mouse_world_position()
        if self._under_mouse(actor, mx, my):
            if self.game.mouse_pressed and not self._touches_panel(mx):
                self.game.actor_manager.destroy(actor)
                self._register_click()
            else:
                self._pressed = False
        self._tick_cooldown()

    def _handle_tool_buttons(self) -> None:
        mx, my = self.game.mouse_world_position()
        if self.delete_button.pressed():
            self.moving = False
            self.taking = False
            self.deleting = True
        if self.move_button.pressed():
            self.deleting = False
            self.taking = False
            self.moving = True

        grass = self.grass_button.pressed()
        dirt = self.dirt_button.pressed()
        if dirt:
            tile = DirtTile(0, 0, self.game)
        elif grass:
            tile = GrassTile(0, 0, self.game)
        else:
            return

        self.deleting = False
        self.moving = False
        tile.x = _snap(mx, tile.width)
        tile.y = _snap(my, tile.width if my >= 0 else tile.height)
        self.game.actor_manager.add(tile)
        tile.taken = True
        self.hand_active = True
        self.taking = True

    def show_tools(self) -> None:
        """Run one frame of the editor: read the tool buttons and apply the mode."""
        if not self.hand_active:
            self._handle_tool_buttons()

        for actor in self.game.actor_manager:
            if actor.actor_type in _TOOL_TYPES:
                continue
            if self.moving:
                self.take_actor(actor)
            if self.taking and actor.taken:
                self.take_actor(actor)
                if not actor.taken:
                    self.taking = False
            if self.deleting:
                self.destroy_actor(actor)

    def add_tools(self) -> None:
        """Open the tool panel."""
        for tool in self.tools:
            self.game.actor_manager.add(tool)
        self.active_panel = True

    def remove_tools(self) -> None:
        """Close the tool panel."""
        for tool in self.tools:
            self.game.actor_manager.remove(tool)
        self.active_panel = False