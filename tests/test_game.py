"""
Unit tests for Elevens cards, deck, game sessions and simulation.
"""

import logging
import pytest
from elevens.card import Card, create_cards
from elevens.deck import Deck
from elevens.game import ElevensGame
from elevens.rules import RANKS, SUITS, POINT_VALUES
from elevens.simulation import ElevensSimulation
from elevens.utils import GameLogger, format_board, format_summary
from elevens import run
from conftest import make_card


@pytest.fixture
def root_level():
    """Restore the root logger level changed by setup_logging."""
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)


class TestCard:
    """Test card functionality."""

    def test_card_creation(self):
        card = Card("queen", "hearts", 0)
        assert card.rank == "queen"
        assert card.suit == "hearts"
        assert card.point_value == 0
        assert card.is_face()
        assert not Card("10", "hearts", 10).is_face()
        assert str(card) == "queen of hearts (point value = 0)"

    def test_matches_ignores_point_value(self):
        a = Card("beeb", "clubs", 3)
        b = Card("beeb", "clubs", 7)
        assert a.matches(b)
        assert a == b
        assert hash(a) == hash(b)
        assert not a.matches(Card("beeb", "spades", 3))

    def test_create_cards_mismatch(self):
        with pytest.raises(ValueError):
            create_cards(["2", "3"], ["ee"], [2])


class TestDeck:
    """Test deck functionality."""

    def test_deck_creation(self):
        deck = Deck(RANKS, SUITS, POINT_VALUES)
        assert deck.size() == 52
        assert len(set(deck.cards)) == 52
        assert not deck.is_empty()

    def test_small_deck(self):
        deck = Deck(["2", "3", "6"], ["ee", "eeee"], [1, 2, 3])
        assert len(deck) == 6
        assert "size = 6" in str(deck)

    def test_deal_from_front(self):
        deck = Deck(RANKS, SUITS, POINT_VALUES)
        first = deck.cards[0]
        assert deck.deal() is first
        assert deck.size() == 51
        assert deck.dealt == [first]

    def test_deal_exhausted(self):
        deck = Deck(["ace"], ["spades"], [1])
        assert deck.deal() is not None
        assert deck.is_empty()
        assert deck.deal() is None

    def test_reset(self):
        deck = Deck(RANKS, SUITS, POINT_VALUES)
        for _ in range(10):
            deck.deal()
        deck.reset()
        assert deck.size() == 52
        assert deck.dealt == []


class TestGame:
    """Test game sessions."""

    def test_play_selection(self, scenario_board):
        game = ElevensGame(scenario_board)

        assert not game.play_selection([0, 5])
        assert game.plays == 0
        assert scenario_board.card_at(0).rank == "ace"

        assert game.play_selection([5, 6])
        assert game.plays == 1
        assert scenario_board.card_at(5).rank == "3"
        assert scenario_board.card_at(6).rank == "4"

    def test_play_selection_triplet(self, scenario_board):
        game = ElevensGame(scenario_board)
        assert game.play_selection([4, 1, 3])
        assert scenario_board.card_at(4).rank == "3"
        assert scenario_board.card_at(1).rank == "4"
        assert scenario_board.card_at(3) is None

    def test_play_game_until_won(self, board_factory):
        board = board_factory(["ace", "10", "2", "9", "3", "8", "jack", "queen", "king"])
        game = ElevensGame(board)

        result = game.play_game()

        assert result == {
            'won': True,
            'plays': 4,
            'cards_left_on_board': 0,
            'cards_left_in_deck': 0
        }
        assert game.is_over()

    def test_play_game_stuck(self, board_factory):
        board = board_factory(["ace", "2", "3", "4", "5", "jack", "queen", "jack", "queen"],
                              deck=["king"])
        result = ElevensGame(board).play_game()
        assert not result['won']
        assert result['plays'] == 0
        assert result['cards_left_on_board'] == 9
        assert result['cards_left_in_deck'] == 1

    def test_play_game_max_plays(self, scenario_board):
        game = ElevensGame(scenario_board)
        result = game.play_game(max_plays=1)
        assert result['plays'] == 1
        assert not game.is_over()

    def test_full_random_game(self):
        game = ElevensGame()
        result = game.play_game()
        assert game.is_over()
        assert result['cards_left_on_board'] <= 9
        assert result['won'] == (result['cards_left_on_board'] == 0)


class TestSimulation:
    """Test batches of games."""

    def test_run(self):
        summary = ElevensSimulation(5).run()
        assert summary['games'] == 5
        assert 0 <= summary['wins'] <= 5
        assert summary['win_rate'] == pytest.approx(summary['wins'] / 5)
        assert summary['mean_plays'] >= 0
        assert 0 <= summary['mean_cards_left'] <= 9

    def test_needs_a_game(self):
        with pytest.raises(ValueError):
            ElevensSimulation(0)

    def test_cli(self, capsys, root_level):
        summary = run.main(["--games", "2"])
        assert summary['games'] == 2
        assert "Games played: 2" in capsys.readouterr().out

    def test_cli_quiet_by_default(self, caplog, root_level):
        run.main(["--games", "1"])
        assert root_level.level == logging.WARNING
        assert not [r for r in caplog.records if r.levelno < logging.WARNING]
        assert not [m for m in caplog.messages if m.startswith("Board:")]

    def test_cli_verbose(self, caplog, root_level):
        run.main(["--games", "1", "--verbose"])
        assert root_level.level == logging.DEBUG
        assert any(m.startswith("Board:") for m in caplog.messages)
        assert any(r.name == "ElevensGame" and "GAME COMPLETE" in r.getMessage()
                   for r in caplog.records)


class TestUtils:
    """Test formatting and logging helpers."""

    def test_format_board(self):
        cards = [make_card("ace"), None, Card("king", "clubs", 0)]
        assert format_board(cards) == "0:ace/spades 1:-- 2:king/clubs"

    def test_format_summary(self):
        text = format_summary({'games': 4, 'wins': 1, 'win_rate': 0.25,
                               'mean_plays': 10.0, 'mean_cards_left': 3.5})
        assert "Win rate: 25.00%" in text

    def test_game_logger_file(self, tmp_path):
        log_file = tmp_path / "elevens.log"
        game_logger = GameLogger(str(log_file), name="ElevensFileTest", level=logging.DEBUG)
        game_logger.log_game_end(True, 12)
        for handler in game_logger.logger.handlers:
            handler.flush()
        assert "won after 12 plays" in log_file.read_text()

    def test_game_logger_propagates(self, caplog):
        with caplog.at_level(logging.INFO, logger="ElevensGame"):
            GameLogger().log_play([0, 2], [make_card("ace"), make_card("10")])
        assert "Removed slots [0, 2]: ace/spades, 10/spades" in caplog.messages

    def test_game_logger_second_file(self, tmp_path):
        first = tmp_path / "first.log"
        second = tmp_path / "second.log"
        GameLogger(str(first), name="ElevensTwoFiles", level=logging.DEBUG)
        game_logger = GameLogger(str(second), name="ElevensTwoFiles")
        GameLogger(str(second), name="ElevensTwoFiles")

        game_logger.log_game_end(False, 3)
        for handler in game_logger.logger.handlers:
            handler.flush()

        assert len(game_logger.logger.handlers) == 2
        assert "lost after 3 plays" in first.read_text()
        assert "lost after 3 plays" in second.read_text()

    def test_game_logger_inherits_level(self, caplog):
        game_logger = GameLogger(name="ElevensInherit")
        assert game_logger.logger.level == logging.NOTSET
        with caplog.at_level(logging.WARNING):
            game_logger.log_board([make_card("ace")])
        assert not caplog.records
