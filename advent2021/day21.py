"""Dirac dice: a deterministic game and its quantum variant."""

from __future__ import annotations

from dataclasses import dataclass, field

_BOARD = 10
_DIE_SIDES = 100
_TARGET_PART1 = 1000
_TARGET_PART2 = 21

# Sum of three rolls of a three-sided die and how many universes produce it.
_UNIVERSES = [(3, 1), (4, 3), (5, 6), (6, 7), (7, 6), (8, 3), (9, 1)]


@dataclass
class DeterministicDie:
    current: int = 0
    num_rolls: int = 0

    def roll(self) -> int:
        self.current = 1 if self.current == _DIE_SIDES else self.current + 1
        self.num_rolls += 1
        return self.current

    def roll3(self) -> tuple[int, int, int]:
        return self.roll(), self.roll(), self.roll()


@dataclass
class Player:
    """A player on the circular board; pos is zero based (0..9)."""

    pos: int
    score: int = 0

    @classmethod
    def parse(cls, text: str) -> Player:
        """Parse 'Player N starting position: P'."""
        _, sep, raw = text.partition(": ")
        if not sep:
            raise ValueError(f"invalid player line {text!r}")
        pos = int(raw)
        if not 1 <= pos <= _BOARD:
            raise ValueError(f"starting position out of range: {pos}")
        return cls(pos - 1)

    def play(self, die: DeterministicDie) -> None:
        self.play_with_roll(sum(die.roll3()))

    def play_with_roll(self, roll: int) -> None:
        self.pos = (self.pos + roll) % _BOARD
        self.score += self.pos + 1

    def has_won_part1(self) -> bool:
        return self.score >= _TARGET_PART1

    def has_won_part2(self) -> bool:
        return self.score >= _TARGET_PART2


@dataclass
class Game:
    players: list[Player] = field(default_factory=list)
    current_player: int = 0

    def play_turn(self, roll: int) -> None:
        self.players[self.current_player].play_with_roll(roll)
        self.current_player = (self.current_player + 1) % len(self.players)

    def _copy(self) -> Game:
        return Game([Player(p.pos, p.score) for p in self.players], self.current_player)

    def _key(self) -> tuple[int, ...]:
        return (
            self.current_player,
            *(value for p in self.players for value in (p.pos, p.score)),
        )


def _parse_players(text: str) -> tuple[Player, Player]:
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) < 2:
        raise ValueError("expected two player lines")
    return Player.parse(lines[0]), Player.parse(lines[1])


def part1(text: str) -> int:
    current, other = _parse_players(text)
    die = DeterministicDie()
    while True:
        current.play(die)
        if current.has_won_part1():
            return die.num_rolls * other.score
        current, other = other, current


def _count_wins(game: Game, cache: dict[tuple[int, ...], tuple[int, ...]]) -> tuple[int, ...]:
    key = game._key()
    cached = cache.get(key)
    if cached is not None:
        return cached

    winner = next(
        (i for i, player in enumerate(game.players) if player.has_won_part2()), None
    )
    if winner is not None:
        result = tuple(int(i == winner) for i in range(len(game.players)))
    else:
        wins = [0] * len(game.players)
        for roll, weight in _UNIVERSES:
            universe = game._copy()
            universe.play_turn(roll)
            for i, count in enumerate(_count_wins(universe, cache)):
                wins[i] += weight * count
        result = tuple(wins)

    cache[key] = result
    return result


def part2(text: str) -> int:
    game = Game(list(_parse_players(text)))
    return max(_count_wins(game, {}))