"""Game - wires the engine, board and economy behind the player command surface."""
from __future__ import annotations

from typing import Any

from loguru import logger

from tick_defense import describe
from tick_defense.catalog import enemy_type, tower_type
from tick_defense.chronicle import Chronicle
from tick_defense.clock import Ticker
from tick_defense.commands import (
    CommandQueue,
    Inspect,
    Pause,
    PlaceTower,
    RemoveFocused,
    Reset,
    SelectTowerType,
    Start,
    TogglePlacement,
    UpgradeFocused,
)
from tick_defense.components import Enemy, Tower
from tick_defense.config import GameConfig
from tick_defense.economy import Economy, refund_value
from tick_defense.engine import Engine
from tick_defense.grid import Board
from tick_defense.lifecycle import GAME_OVER, PAUSE, RESET, RUNNING, START, Lifecycle
from tick_defense.signals import (
    CHANGED,
    PHASE,
    TOWER_PLACED,
    TOWER_REMOVED,
    TOWER_UPGRADED,
    SignalBus,
)
from tick_defense.snapshot import EnemyView, GameSnapshot, TowerView
from tick_defense.state import INITIAL_STATUS, GameState, announce
from tick_defense.systems import (
    make_attack_system,
    make_cleanup_system,
    make_effect_decay_system,
    make_loss_system,
    make_movement_system,
    make_spawn_system,
    make_wave_system,
)
from tick_defense.targeting import enemy_at, enemy_position
from tick_defense.types import EntityId, Position
from tick_defense.waves import WaveState, prepare_wave


class Game:
    """One tower-defense session.

    Every public command runs to completion, then publishes a single
    ``changed`` signal if anything visible moved and flushes the bus.
    Ticks come from :meth:`advance` (wall-clock time fed by the host loop)
    or :meth:`step` (one tick, for tests and headless runs); both only act
    while the game is running.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        self._config = config if config is not None else GameConfig()
        self._engine = Engine(tick_duration=self._config.tick_duration, seed=self._config.seed)
        self._board = Board()
        self._bus = SignalBus()
        self._state = GameState()
        self._lifecycle = Lifecycle()
        self._ticker = Ticker(self._config.tick_duration, self.step)
        self._chronicle = Chronicle(
            self._bus,
            lambda: (self._engine.ticks_run, self._state.wave.number),
            max_entries=self._config.chronicle_size,
        )
        self._commands = CommandQueue(
            on_accept=lambda cmd: logger.debug("accepted {}", cmd),
            on_reject=lambda cmd: logger.debug("rejected {}", cmd),
        )

        store = self._engine.store
        store.on_attach(Tower, lambda s, eid, tower: self._board.place(eid, tower.position))
        store.on_detach(Tower, lambda s, eid, tower: self._board.remove(eid))

        self._lifecycle.on_transition(self._on_transition)
        self._engine.on_stop(lambda s, ctx: self._ticker.cancel())

        state, bus, board = self._state, self._bus, self._board
        self._engine.add_system(make_spawn_system(state, bus))
        self._engine.add_system(make_movement_system(board, state, bus))
        self._engine.add_system(make_attack_system(board, state, bus))
        self._engine.add_system(make_cleanup_system(state, bus))
        self._engine.add_system(make_effect_decay_system(state))
        self._engine.add_system(make_wave_system(state, bus, self._engine.clock))
        self._engine.add_system(make_loss_system(state, self._lifecycle, bus))

        self._commands.handle(SelectTowerType, self._handle_select)
        self._commands.handle(TogglePlacement, self._handle_toggle)
        self._commands.handle(PlaceTower, self._handle_place)
        self._commands.handle(UpgradeFocused, self._handle_upgrade)
        self._commands.handle(RemoveFocused, self._handle_remove)
        self._commands.handle(Inspect, self._handle_inspect)
        self._commands.handle(Start, self._handle_start)
        self._commands.handle(Pause, self._handle_pause)
        self._commands.handle(Reset, self._handle_reset)

        logger.debug("game created with seed {}", self._engine.seed)

    # -- Wiring --

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def board(self) -> Board:
        return self._board

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def chronicle(self) -> Chronicle:
        return self._chronicle

    @property
    def ticker(self) -> Ticker:
        return self._ticker

    @property
    def seed(self) -> int:
        return self._engine.seed

    def _on_transition(self, old: str, event: str, new: str) -> None:
        self._state.dirty = True
        self._bus.publish(PHASE, old=old, event=event, new=new)
        logger.debug("phase {} --{}--> {}", old, event, new)

    def _commit(self) -> None:
        if self._state.dirty:
            self._state.dirty = False
            self._bus.publish(CHANGED)
        self._bus.flush()

    # -- Clock --

    def step(self) -> bool:
        """Run one tick if the game is running. Returns whether a tick ran."""
        if self._lifecycle.phase != RUNNING:
            return False
        self._engine.step()
        self._commit()
        return True

    def advance(self, elapsed: float) -> int:
        """Feed *elapsed* seconds of host time. Returns the number of ticks run."""
        return self._ticker.feed(elapsed)

    # -- Commands --

    def execute(self, cmd: Any) -> bool:
        accepted = self._commands.execute(cmd)
        self._commit()
        return accepted

    def submit(self, cmd: Any) -> None:
        """Queue *cmd* for the next :meth:`process_commands` call."""
        self._commands.enqueue(cmd)

    def process_commands(self) -> list[tuple[Any, bool]]:
        results = self._commands.drain()
        self._commit()
        return results

    def select_tower_type(self, kind: str) -> bool:
        return self.execute(SelectTowerType(kind))

    def toggle_placement(self) -> bool:
        return self.execute(TogglePlacement())

    def place_tower(self, pos: Position) -> bool:
        return self.execute(PlaceTower(pos))

    def upgrade_focused(self) -> bool:
        return self.execute(UpgradeFocused())

    def remove_focused(self) -> bool:
        return self.execute(RemoveFocused())

    def inspect(self, pos: Position) -> bool:
        return self.execute(Inspect(pos))

    def start(self) -> bool:
        return self.execute(Start())

    def pause(self) -> bool:
        return self.execute(Pause())

    def reset(self) -> bool:
        return self.execute(Reset())

    # -- Command handlers --

    def _announce(self, message: str) -> None:
        announce(self._state, self._bus, message)

    def _placement_prompt(self, kind: str) -> str:
        ttype = tower_type(kind)
        return f"Pick a grass tile for the {ttype.display_name} ({ttype.build_cost} coins)"

    def _handle_select(self, cmd: SelectTowerType) -> bool:
        ttype = tower_type(cmd.kind)
        self._state.selected = ttype.name
        if self._state.placing:
            self._announce(self._placement_prompt(ttype.name))
        else:
            self._announce(f"Selected the {ttype.display_name}, press place to build")
        return True

    def _handle_toggle(self, cmd: TogglePlacement) -> bool:
        state = self._state
        if self.is_game_over:
            return False
        if state.placing:
            state.placing = False
            self._announce("Placement cancelled")
            return True
        ttype = tower_type(state.selected)
        if not state.economy.can_afford(ttype.build_cost):
            self._announce(f"Not enough coins to place the {ttype.display_name}")
            return False
        state.focused = None
        state.placing = True
        self._announce(self._placement_prompt(ttype.name))
        return True

    def _handle_place(self, cmd: PlaceTower) -> bool:
        state = self._state
        if self.is_game_over or not state.placing:
            return False
        ttype = tower_type(state.selected)
        if not state.economy.can_afford(ttype.build_cost):
            state.placing = False
            self._announce("Not enough coins to place a tower")
            return False
        pos = cmd.position
        if not self._board.can_place(pos):
            if self._board.is_path(pos):
                self._announce("Towers cannot be placed on the road")
            elif self._board.is_occupied(pos):
                self._announce("There is already a tower here")
            else:
                self._announce("That tile is off the board")
            return False

        state.economy.spend(ttype.build_cost)
        store = self._engine.store
        eid = store.spawn()
        store.attach(eid, Tower(kind=ttype.name, position=pos))
        state.focused = eid
        state.placing = False
        self._announce(f"Placed the {ttype.display_name}!")
        self._bus.publish(TOWER_PLACED, eid=eid, kind=ttype.name, position=pos)
        return True

    def _handle_upgrade(self, cmd: UpgradeFocused) -> bool:
        state = self._state
        if self.is_game_over:
            return False
        focused = self._focused()
        if focused is None:
            self._announce("Select a tower to upgrade first")
            return False
        eid, tower = focused
        ttype = tower_type(tower.kind)
        cost = ttype.upgrade_cost(tower.level)
        if cost is None:
            self._announce(f"The {ttype.display_name} is already at max level")
            return False
        if not state.economy.spend(cost):
            self._announce(f"Not enough coins, upgrading costs {cost}")
            return False
        tower.level += 1
        self._announce(f"{ttype.display_name} upgraded to Lv{tower.level}!")
        self._bus.publish(TOWER_UPGRADED, eid=eid, kind=tower.kind, level=tower.level, cost=cost)
        return True

    def _handle_remove(self, cmd: RemoveFocused) -> bool:
        state = self._state
        if self.is_game_over:
            return False
        focused = self._focused()
        if focused is None:
            self._announce("Select a tower to remove first")
            return False
        eid, tower = focused
        ttype = tower_type(tower.kind)
        self._engine.store.despawn(eid)
        state.focused = None
        refund = refund_value(tower.kind, tower.level)
        if refund > 0:
            state.economy.earn(refund)
            self._announce(f"Removed the {ttype.display_name}, refunded {refund} coins")
        else:
            self._announce(f"Removed the {ttype.display_name}")
        self._bus.publish(TOWER_REMOVED, eid=eid, kind=tower.kind, refund=refund)
        return True

    def _handle_inspect(self, cmd: Inspect) -> bool:
        state = self._state
        pos = cmd.position
        if not self._board.in_bounds(pos):
            return False
        found = self._tower_at(pos)
        if found is not None:
            eid, tower = found
            state.focused = eid
            self._announce(describe.tower_status(tower, self._engine.clock))
            return True
        state.focused = None
        hit = enemy_at(self._engine.store, self._board, pos)
        if hit is not None:
            self._announce(describe.enemy_status(hit[1]))
        elif self._board.is_path(pos):
            self._announce("This is the road enemies walk")
        else:
            self._announce(describe.empty_tile_status(state.selected, state.economy.coins))
        return True

    def _handle_start(self, cmd: Start) -> bool:
        if not self._lifecycle.can(START):
            return False
        if self._lifecycle.phase == GAME_OVER:
            self._reset_state()
        state = self._state
        if not state.wave.prepared and self._engine.store.count(Enemy) == 0:
            prepare_wave(state.wave, state.wave.number)
            self._engine.clock.reset()
        self._lifecycle.fire(START)
        self._announce(f"Wave {state.wave.number} incoming!")
        self._ticker.start()
        return True

    def _handle_pause(self, cmd: Pause) -> bool:
        if not self._lifecycle.can(PAUSE):
            return False
        self._lifecycle.fire(PAUSE)
        self._ticker.cancel()
        self._announce("Game paused")
        return True

    def _handle_reset(self, cmd: Reset) -> bool:
        self._reset_state()
        self._lifecycle.fire(RESET)
        self._announce("Game reset. " + INITIAL_STATUS)
        return True

    def _reset_state(self) -> None:
        self._ticker.cancel()
        self._engine.reset()
        state = self._state
        state.economy = Economy()
        state.wave = WaveState()
        state.hit_markers.clear()
        state.placing = False
        state.selected = "archer"
        state.focused = None
        state.status = INITIAL_STATUS
        state.dirty = True
        self._chronicle.clear()
        logger.debug("state reset")

    # -- Queries --

    def _focused(self) -> tuple[EntityId, Tower] | None:
        eid = self._state.focused
        if eid is None or not self._engine.store.has(eid, Tower):
            return None
        return eid, self._engine.store.get(eid, Tower)

    def _tower_at(self, pos: Position) -> tuple[EntityId, Tower] | None:
        store = self._engine.store
        for eid in sorted(self._board.at(pos)):
            if store.has(eid, Tower):
                return eid, store.get(eid, Tower)
        return None

    @property
    def phase(self) -> str:
        return self._lifecycle.phase

    @property
    def is_running(self) -> bool:
        return self._lifecycle.phase == RUNNING

    @property
    def is_game_over(self) -> bool:
        return self._lifecycle.phase == GAME_OVER

    @property
    def is_placing(self) -> bool:
        return self._state.placing

    @property
    def coins(self) -> int:
        return self._state.economy.coins

    @property
    def lives(self) -> int:
        return self._state.economy.lives

    @property
    def wave(self) -> int:
        return self._state.wave.number

    @property
    def wave_progress(self) -> tuple[int, int]:
        """``(spawned, to_spawn)`` for the wave in flight."""
        return self._state.wave.spawned, self._state.wave.to_spawn

    @property
    def tick_number(self) -> int:
        """Ticks elapsed in the current wave."""
        return self._engine.clock.tick_number

    @property
    def status(self) -> str:
        return self._state.status

    @property
    def selected_type(self) -> str:
        return self._state.selected

    @property
    def focused_tower(self) -> TowerView | None:
        focused = self._focused()
        if focused is None:
            return None
        return _tower_view(*focused)

    @property
    def can_upgrade_focused(self) -> bool:
        focused = self._focused()
        if focused is None:
            return False
        cost = tower_type(focused[1].kind).upgrade_cost(focused[1].level)
        return cost is not None and self.coins >= cost

    @property
    def can_remove_focused(self) -> bool:
        return self._focused() is not None

    def upgrade_button_label(self) -> str:
        focused = self._focused()
        return describe.upgrade_label(focused[1] if focused is not None else None)

    def focused_summary(self) -> str | None:
        focused = self._focused()
        if focused is None:
            return None
        return describe.tower_summary(focused[1])

    def can_place(self, pos: Position) -> bool:
        return self._board.can_place(pos)

    def help_text(self, pos: Position) -> str:
        found = self._tower_at(pos)
        if found is not None:
            return describe.tower_help(found[1], self._engine.clock)
        hit = enemy_at(self._engine.store, self._board, pos)
        if hit is not None:
            return describe.enemy_help(hit[1])
        if self._board.is_path(pos):
            return "Enemy road"
        return describe.empty_tile_help(self._state.selected, self.coins)

    def tile_symbol(self, pos: Position) -> str | None:
        hit = enemy_at(self._engine.store, self._board, pos)
        if hit is not None:
            return enemy_type(hit[1].kind).emoji
        found = self._tower_at(pos)
        if found is not None:
            return tower_type(found[1].kind).emoji
        return None

    def enemy_health_at(self, pos: Position) -> int | None:
        hit = enemy_at(self._engine.store, self._board, pos)
        return hit[1].health if hit is not None else None

    def tower_level_at(self, pos: Position) -> int | None:
        found = self._tower_at(pos)
        return found[1].level if found is not None else None

    def is_hit_flashing(self, pos: Position) -> bool:
        return pos in self._state.hit_markers

    def enemies(self) -> tuple[EnemyView, ...]:
        return tuple(
            EnemyView(
                eid=eid,
                kind=enemy.kind,
                position=enemy_position(self._board, enemy),
                health=enemy.health,
                max_health=enemy.max_health,
                slow_ticks=enemy.slow_ticks,
            )
            for eid, enemy in self._engine.store.query(Enemy)
        )

    def towers(self) -> tuple[TowerView, ...]:
        return tuple(_tower_view(eid, tower) for eid, tower in self._engine.store.query(Tower))

    def snapshot(self) -> GameSnapshot:
        state = self._state
        focused = self._focused()
        return GameSnapshot(
            phase=self.phase,
            coins=state.economy.coins,
            lives=state.economy.lives,
            wave=state.wave.number,
            status=state.status,
            placing=state.placing,
            selected=state.selected,
            focused=focused[0] if focused is not None else None,
            enemies=self.enemies(),
            towers=self.towers(),
            hit_markers=frozenset(state.hit_markers),
        )


def _tower_view(eid: EntityId, tower: Tower) -> TowerView:
    return TowerView(
        eid=eid,
        kind=tower.kind,
        position=tower.position,
        level=tower.level,
        cooldown=tower.cooldown,
    )
