import pytest

from advent2021.day21 import DeterministicDie, Game, Player, part1, part2

EXAMPLE = "Player 1 starting position: 4\nPlayer 2 starting position: 8"


def test_example_part1():
    assert part1(EXAMPLE) == 739785


def test_example_part2():
    assert part2(EXAMPLE) == 444356092776315


def test_die_rolls_and_wraps():
    die = DeterministicDie()
    assert die.roll3() == (1, 2, 3)
    assert die.num_rolls == 3
    for _ in range(96):
        die.roll()
    assert die.roll() == 100
    assert die.roll() == 1
    assert die.num_rolls == 101


def test_player_parse():
    player = Player.parse("Player 1 starting position: 4")
    assert player.pos == 3
    assert player.score == 0


def test_player_parse_invalid():
    with pytest.raises(ValueError):
        Player.parse("Player 1 starting at 4")
    with pytest.raises(ValueError):
        Player.parse("Player 1 starting position: 11")


def test_player_play_first_turn():
    player = Player.parse("Player 1 starting position: 4")
    die = DeterministicDie()
    player.play(die)
    # 1 + 2 + 3 from space 4 lands on space 10.
    assert player.score == 10
    assert player.pos == 9


def test_play_with_roll_wraps_board():
    player = Player(pos=8)
    player.play_with_roll(5)
    assert player.pos == 3
    assert player.score == 4


def test_win_thresholds():
    assert Player(0, 21).has_won_part2()
    assert not Player(0, 20).has_won_part2()
    assert Player(0, 1000).has_won_part1()
    assert not Player(0, 999).has_won_part1()


def test_game_alternates_players():
    game = Game([Player(3), Player(7)])
    game.play_turn(3)
    assert game.current_player == 1
    assert game.players[0].score == 7
    game.play_turn(3)
    assert game.current_player == 0
    assert game.players[1].score == 1


def test_missing_player_line():
    with pytest.raises(ValueError):
        part1("Player 1 starting position: 4")