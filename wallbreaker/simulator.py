"""
Battle simulator - the turn-based state machine.
NO UI DEPENDENCIES.

Heroes act one at a time (move, then attack in a direction); once every
living hero has acted the enemies take their turn. Knocking down the wall
completes the level, losing the whole party ends the game.

Usage:
    sim = BattleSimulator(party, enemies, rows=8, cols=6, wall_hp=20,
                          log_callback=print)
    sim.move(0, 1)
    sim.begin_attack()
    result = await sim.attack(0, 1)
    if result.outcome == TurnOutcome.LEVEL_COMPLETE:
        ...
"""
import logging
import random
from typing import Callable, List, Optional, Sequence

from .clock import Clock, AsyncioClock
from .config import Settings, get_settings
from .constants import ADJACENT_OFFSETS, VITTLE_HEAL, BURN_DURATION, SLUJ_DURATION
from .enemy_ai import move_enemy, adjacent_heroes, pick_dialogue
from .grid import Battlefield
from .knockback import apply_knockback
from .models import (
    Unit, LevelObject, Side, TurnState, TurnOutcome, BattlePhase,
    BattleEvent, ActionResult,
)
from .status import apply_burn, apply_sluj, tick_units

logger = logging.getLogger(__name__)

DIRECTION_VALUES = (-1, 0, 1)


class BattleSimulator:
    """
    Holds the battlefield, the party, the enemies, the wall and the turn
    pointer, and applies every rule in a fixed order.

    All state is plain data. Lifecycle notifications are returned as a
    TurnOutcome and, when given, also delivered through the
    on_level_complete / on_game_over callbacks (each at most once).
    """

    def __init__(
        self,
        party: Sequence[Unit],
        enemies: Sequence[Unit],
        rows: int,
        cols: int,
        wall_hp: int,
        log_callback: Optional[Callable[[str], None]] = None,
        on_level_complete: Optional[Callable[[], None]] = None,
        on_game_over: Optional[Callable[[], None]] = None,
        level_objects: Optional[Sequence[LevelObject]] = None,
        clock: Optional[Clock] = None,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
    ):
        self.party: List[Unit] = [hero for hero in party if hero.hp > 0]
        self.enemies: List[Unit] = list(enemies)
        self.rows = rows
        self.cols = cols
        self.wall_hp = wall_hp

        self.log_callback = log_callback
        self.on_level_complete = on_level_complete
        self.on_game_over = on_game_over

        self.clock = clock or AsyncioClock()
        self.settings = settings or get_settings()
        self.rng = rng or random.Random()

        self.turn = TurnState(
            current_unit=0,
            move_points=self.party[0].agility if self.party else 0,
        )
        self.log_lines: List[str] = []
        self._events: List[BattleEvent] = []
        self._defeated = False
        self._level_complete_sent = False
        self._game_over_sent = False

        for hero in self.party:
            hero.side = Side.HERO
        for enemy in self.enemies:
            enemy.side = Side.ENEMY
            enemy.status.clear()

        self.grid = self._initialize_battlefield(level_objects or [])

    # =========================================================================
    # SETUP
    # =========================================================================

    def _initialize_battlefield(self, level_objects: Sequence[LevelObject]) -> Battlefield:
        grid = Battlefield(self.rows, self.cols)

        # Heroes line up along the top row; extras pile into the last column.
        for index, hero in enumerate(self.party):
            grid.place_unit(hero, min(index, self.cols - 1), 0)

        for enemy in self.enemies:
            if not grid.place_unit(enemy, enemy.x, enemy.y):
                logger.warning(f"{enemy.name} at ({enemy.x},{enemy.y}) is off the battlefield")

        grid.build_wall()

        for obj in level_objects:
            if not grid.place_object(obj):
                logger.debug(f"Dropped {obj.object_type} at ({obj.x},{obj.y})")

        return grid

    # =========================================================================
    # QUERIES (for the presentation layer)
    # =========================================================================

    @property
    def current_hero(self) -> Optional[Unit]:
        """The hero whose turn it is, or None once the party is gone."""
        if not self.party:
            return None
        if not 0 <= self.turn.current_unit < len(self.party):
            return None
        return self.party[self.turn.current_unit]

    @property
    def active_position(self) -> Optional[tuple]:
        hero = self.current_hero
        return hero.position if hero else None

    @property
    def move_points(self) -> int:
        return self.turn.move_points

    @property
    def awaiting_attack_direction(self) -> bool:
        return self.turn.awaiting_attack_direction

    @property
    def transitioning_level(self) -> bool:
        return self.turn.transitioning_level

    @property
    def phase(self) -> BattlePhase:
        if self.turn.transitioning_level:
            return BattlePhase.VICTORY_PENDING
        if self._defeated:
            return BattlePhase.DEFEAT
        return BattlePhase.HERO_TURN

    @property
    def is_over(self) -> bool:
        return self.phase != BattlePhase.HERO_TURN

    # =========================================================================
    # EVENT LOG
    # =========================================================================

    def _emit(self, event_type: str, message: str, announce: bool = True, **data) -> None:
        """Record an event; announced events also go to the log sink."""
        data = {key: value.name if isinstance(value, Unit) else value
                for key, value in data.items()}
        self._events.append(BattleEvent(event_type, message, data))
        if not announce:
            logger.debug(message)
            return

        self.log_lines.append(message)
        logger.info(message)
        if self.log_callback is not None:
            self.log_callback(message)

    def _collect_events(self) -> List[BattleEvent]:
        events, self._events = self._events, []
        return events

    def _rejected(self, reason: str) -> ActionResult:
        logger.debug(f"Action rejected: {reason}")
        return ActionResult.failure(reason)

    def _check_can_act(self) -> Optional[str]:
        if self.turn.transitioning_level:
            return "Level transition in progress"
        if self._defeated or not self.party:
            return "Battle is over"
        return None

    # =========================================================================
    # PLAYER ACTIONS
    # =========================================================================

    def begin_attack(self) -> bool:
        """Enter attack mode: the next input is an attack direction."""
        if self._check_can_act() is not None:
            return False
        self.turn.awaiting_attack_direction = True
        return True

    def cancel_attack(self) -> None:
        self.turn.awaiting_attack_direction = False

    def move(self, dx: int, dy: int) -> ActionResult:
        """
        Move the acting hero one cell in any of the 8 directions.

        Stepping onto a level object consumes it. Spending the last move
        point ends the hero's turn.
        """
        if dx not in DIRECTION_VALUES or dy not in DIRECTION_VALUES or (dx, dy) == (0, 0):
            return self._rejected(f"Invalid direction ({dx}, {dy})")
        reason = self._check_can_act()
        if reason:
            return self._rejected(reason)
        if self.turn.awaiting_attack_direction:
            return self._rejected("Awaiting attack direction")
        if self.turn.move_points <= 0:
            return self._rejected("No move points left")

        unit = self.current_hero
        new_x, new_y = unit.x + dx, unit.y + dy
        if not self.grid.is_open(new_x, new_y):
            return self._rejected("Cannot move there")

        obj = self.grid.take_object(new_x, new_y)
        if obj is not None:
            self._consume(unit, obj)

        from_x, from_y = unit.x, unit.y
        self.grid.move_unit(unit, new_x, new_y)
        self._emit("move", f"{unit.name} moves to ({new_x},{new_y}).", announce=False,
                   unit=unit, from_x=from_x, from_y=from_y, to_x=new_x, to_y=new_y)

        self.turn.move_points -= 1
        outcome = TurnOutcome.CONTINUE
        if self.turn.move_points == 0:
            outcome = self.next_turn()
        return ActionResult.ok(self._collect_events(), outcome)

    def _consume(self, unit: Unit, obj: LevelObject) -> None:
        if obj.is_vittle:
            unit.hp += VITTLE_HEAL
            self._emit("consume",
                       f"{unit.name} consumes a vittle and heals for {VITTLE_HEAL} HP! "
                       f"(New HP: {unit.hp})",
                       unit=unit, object_type=obj.object_type, amount=VITTLE_HEAL,
                       new_hp=unit.hp)
        else:
            logger.debug(f"{unit.name} picks up {obj.object_type}, which does nothing")

    async def attack(self, dx: int, dy: int, unit: Optional[Unit] = None) -> ActionResult:
        """
        Attack along a direction, resolving only the first thing in range:
        an ally (healed, or nothing happens), an enemy (damage plus the
        attacker's burn / sluj / yeet), or the wall. Anything else whiffs.

        Then pause briefly and advance the turn, unless the wall fell.
        """
        if dx not in DIRECTION_VALUES or dy not in DIRECTION_VALUES or (dx, dy) == (0, 0):
            return self._rejected(f"Invalid direction ({dx}, {dy})")
        reason = self._check_can_act()
        if reason:
            return self._rejected(reason)
        unit = unit or self.current_hero

        self._emit("attack", f"{unit.name} attacked in direction ({dx}, {dy}).",
                   unit=unit, dx=dx, dy=dy)

        for distance in range(1, unit.range + 1):
            target_x = unit.x + dx * distance
            target_y = unit.y + dy * distance
            if not self.grid.in_bounds(target_x, target_y):
                break

            occupant = self.grid.unit_at(target_x, target_y)
            if occupant is unit:
                continue

            if occupant is not None and occupant.is_hero:
                self._hit_ally(unit, occupant)
                return await self._finish_attack()

            if occupant is not None:
                self._hit_enemy(unit, occupant, dx, dy)
                return await self._finish_attack()

            if self.grid.is_wall(target_x, target_y):
                return await self._hit_wall(unit)

        self._emit("miss", f"{unit.name} attacks, but there's nothing in range.", unit=unit)
        return await self._finish_attack()

    def _hit_ally(self, unit: Unit, ally: Unit) -> None:
        heal = unit.abilities.heal
        if heal > 0:
            ally.hp += heal
            self._emit("heal",
                       f"{unit.name} heals {ally.name} for {heal} HP! (New HP: {ally.hp})",
                       unit=unit, target=ally, amount=heal, new_hp=ally.hp)
        else:
            self._emit("heal", f"{unit.name} attacks {ally.name} but nothing happens.",
                       unit=unit, target=ally, amount=0, new_hp=ally.hp)

    def _hit_enemy(self, unit: Unit, enemy: Unit, dx: int, dy: int) -> None:
        enemy.hp -= unit.attack
        self._emit("damage",
                   f"{unit.name} attacks {enemy.name} for {unit.attack} damage! "
                   f"(HP left: {enemy.hp})",
                   unit=unit, target=enemy, amount=unit.attack, new_hp=enemy.hp)

        abilities = unit.abilities
        if abilities.has("burn"):
            apply_burn(enemy, abilities.burn)
            self._emit("status",
                       f"{enemy.name} is now burning for {abilities.burn} damage per turn "
                       f"for {BURN_DURATION} turns!",
                       target=enemy, effect="burn", damage=abilities.burn,
                       duration=BURN_DURATION)

        if abilities.has("sluj"):
            sluj = apply_sluj(enemy, abilities.sluj)
            self._emit("status",
                       f"{enemy.name} is afflicted with slüj (level {sluj.level}) "
                       f"for {SLUJ_DURATION} turns!",
                       target=enemy, effect="sluj", level=sluj.level,
                       duration=sluj.duration)

        if abilities.has("yeet"):
            apply_knockback(enemy, dx, dy, abilities.yeet, unit.attack,
                            self.grid, self._emit, self.grid.in_bounds)

        if enemy.hp <= 0:
            self._remove_enemy(enemy, f"{enemy.name} is defeated!", cause="attack")

    async def _hit_wall(self, unit: Unit) -> ActionResult:
        self.wall_hp -= unit.attack
        self._emit("wall",
                   f"{unit.name} attacks the wall for {unit.attack} damage! "
                   f"(Wall HP: {self.wall_hp})",
                   unit=unit, amount=unit.attack, wall_hp=self.wall_hp)
        self.turn.awaiting_attack_direction = False

        if self.wall_hp <= 0 and not self.turn.transitioning_level:
            await self._collapse_wall()
            return ActionResult.ok(self._collect_events(), TurnOutcome.LEVEL_COMPLETE)

        return await self._finish_attack()

    async def _finish_attack(self) -> ActionResult:
        self.turn.awaiting_attack_direction = False
        await self.clock.sleep(self.settings.short_pause_seconds)
        outcome = self.next_turn()
        return ActionResult.ok(self._collect_events(), outcome)

    async def _collapse_wall(self) -> None:
        """Freeze the battle for good, then report the level complete."""
        self.turn.transitioning_level = True
        self._emit("collapse", "The Wall Collapses!")
        await self.clock.sleep(self.settings.collapse_delay_seconds)

        if not self._level_complete_sent:
            self._level_complete_sent = True
            if self.on_level_complete is not None:
                self.on_level_complete()

    # =========================================================================
    # REMOVAL
    # =========================================================================

    def _remove_enemy(self, enemy: Unit, message: str, cause: str) -> None:
        self._emit("defeat", message, target=enemy, cause=cause)
        self.grid.remove_unit(enemy)
        if enemy in self.enemies:
            self.enemies.remove(enemy)

    def _remove_hero(self, hero: Unit) -> None:
        self.grid.remove_unit(hero)
        if hero not in self.party:
            return
        index = self.party.index(hero)
        self.party.pop(index)
        if index <= self.turn.current_unit or self.turn.current_unit >= len(self.party):
            self.turn.current_unit = 0

    # =========================================================================
    # AUTOMATIC RESOLUTION
    # =========================================================================

    def apply_status_effects(self) -> None:
        """One burn / sluj tick for every hero, then every enemy."""
        tick_units(self.party, self.grid, self._emit)
        self.party = [hero for hero in self.party if hero.is_alive]

        tick_units(self.enemies, self.grid, self._emit)
        self.enemies = [enemy for enemy in self.enemies if enemy.is_alive]

    def apply_swarm_damage(self) -> None:
        """Every swarming hero hurts each enemy in the 8 cells around it."""
        for hero in list(self.party):
            damage = hero.abilities.swarm
            if damage <= 0:
                continue

            for offset_x, offset_y in ADJACENT_OFFSETS:
                target_x, target_y = hero.x + offset_x, hero.y + offset_y
                enemy = self.grid.unit_at(target_x, target_y)
                if enemy is None or enemy.is_hero:
                    continue

                enemy.hp -= damage
                self._emit("damage",
                           f"{hero.name}'s swarm deals {damage} damage to {enemy.name} "
                           f"at ({target_x},{target_y})! (HP left: {enemy.hp})",
                           unit=hero, target=enemy, amount=damage, new_hp=enemy.hp)
                if enemy.hp <= 0:
                    self._remove_enemy(enemy, f"{enemy.name} is defeated by swarm damage!",
                                       cause="swarm")

    def enemy_turn(self) -> None:
        """Every enemy walks toward the nearest hero, then hits its neighbours."""
        if self.turn.transitioning_level:
            return

        for enemy in list(self.enemies):
            if not enemy.is_alive:
                continue

            for _ in range(enemy.agility):
                move_enemy(enemy, self.party, self.grid)

            for hero in adjacent_heroes(enemy, self.grid):
                hero.hp -= enemy.attack
                self._emit("damage",
                           f"{enemy.name} attacks {hero.name} for {enemy.attack} damage! "
                           f"(Hero HP: {hero.hp})",
                           unit=enemy, target=hero, amount=enemy.attack, new_hp=hero.hp)
                if hero.hp <= 0:
                    self._emit("defeat", f"{hero.name} is defeated!", target=hero,
                               cause="attack")
                    self._remove_hero(hero)

            line = pick_dialogue(enemy, self.rng)
            if line is not None:
                self._emit("dialogue", f'{enemy.name} says: "{line}"', unit=enemy, line=line)

        self._emit("phase", "Enemy turn completed.", phase="enemy_end")

    # =========================================================================
    # TURN MACHINE
    # =========================================================================

    def next_turn(self) -> TurnOutcome:
        """
        Advance to the next hero.

        Order: status tick, swarm, defeat check, then the next living hero.
        Wrapping past the last hero runs the enemy phase and a second status
        tick before hero 0 starts again.
        """
        if self.turn.transitioning_level:
            return TurnOutcome.LEVEL_COMPLETE
        if self._defeated:
            return TurnOutcome.GAME_OVER

        acting = self.current_hero
        order = list(self.party)

        self.apply_status_effects()
        self.apply_swarm_damage()

        if not self.party:
            return self._game_over()

        index = self._index_after_losses(acting, order)

        self.turn.awaiting_attack_direction = False
        index += 1
        if index >= len(self.party):
            index = 0
            self.turn.current_unit = 0
            self._emit("phase", "Enemy turn begins.", phase="enemy_start")
            self.enemy_turn()
            self.apply_status_effects()
            if not self.party:
                return self._game_over()

        self.turn.current_unit = index
        hero = self.party[index]
        self.turn.move_points = hero.agility
        self._emit("turn", f"Now it's {hero.name}'s turn.", unit=hero)
        return TurnOutcome.CONTINUE

    def _index_after_losses(self, acting: Optional[Unit], order: List[Unit]) -> int:
        """
        Where the acting hero now sits in the party. If it died, the index
        of the last survivor before it (-1 if none), so the next hero in
        line still gets its turn.
        """
        if acting is None:
            return -1
        if acting in self.party:
            return self.party.index(acting)
        old_index = order.index(acting)
        survivors_before = sum(1 for hero in order[:old_index] if hero in self.party)
        return survivors_before - 1

    def _game_over(self) -> TurnOutcome:
        self._defeated = True
        self._emit("game_over", "All heroes have been defeated! Game Over.")
        if not self._game_over_sent:
            self._game_over_sent = True
            if self.on_game_over is not None:
                self.on_game_over()
        return TurnOutcome.GAME_OVER
