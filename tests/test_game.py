# tests/test_game.py
import unittest
from unittest.mock import MagicMock

from stone_paper_scissors.art import ART_HEIGHT, ART_WIDTH, MOVE_ART, VS
from stone_paper_scissors.banner import BannerRunner
from stone_paper_scissors.console import InputReader
from stone_paper_scissors.exceptions import ExhaustedRetries, InputError
from stone_paper_scissors.game import Phase, Presenter, SeriesController
from stone_paper_scissors.moves import ComputerPlayer, Move
from tests.helpers import ScriptedRandom, make_console


def make_controller(text, computer_moves):
    console = make_console(text)
    banner = MagicMock(spec=BannerRunner)
    controller = SeriesController(
        reader=InputReader(console),
        presenter=Presenter(console),
        computer=ComputerPlayer(rng=ScriptedRandom(computer_moves)),
        banner=banner,
    )
    return controller, console, banner


class TestArt(unittest.TestCase):
    def test_pieces_have_uniform_size(self):
        for art in list(MOVE_ART.values()) + [VS]:
            self.assertEqual(len(art), ART_HEIGHT)
            self.assertEqual({len(line) for line in art}, {ART_WIDTH})


class TestSeriesController(unittest.TestCase):
    def test_best_of_one_player_wins_immediately(self):
        controller, console, banner = make_controller("Ada\n1\nstone\n", [Move.SCISSORS])
        state = controller.run()

        self.assertEqual(controller.phase, Phase.SERIES_COMPLETE)
        self.assertEqual((state.player_wins, state.computer_wins), (1, 0))
        self.assertEqual(state.rounds_played, 1)
        banner.show.assert_called_once_with(
            "Ada  :  1        |        Computer  :  0\nAda   wins !"
        )
        output = console.stdout.getvalue()
        self.assertNotIn("Ada : 1 | Computer : 0", output)
        self.assertIn(".\n..\n...\n", output)

    def test_best_of_three_stops_at_quorum(self):
        controller, console, banner = make_controller(
            "Ada\n3\nstone\npaper\nscissors\nstone\n",
            [Move.STONE, Move.STONE, Move.PAPER],
        )
        state = controller.run()

        self.assertEqual(state.rounds_played, 3)
        self.assertEqual((state.player_wins, state.computer_wins), (2, 0))
        self.assertTrue(state.player_won)
        # The fourth line of input is never consumed.
        self.assertEqual(console.stdin.readline(), "stone\n")
        output = console.stdout.getvalue()
        self.assertIn("Ada : 0 | Computer : 0", output)
        self.assertIn("Ada : 1 | Computer : 0", output)
        self.assertNotIn("Ada : 2 | Computer : 0", output)
        banner.show.assert_called_once_with(
            "Ada  :  2        |        Computer  :  0\nAda   wins !"
        )

    def test_computer_can_win(self):
        controller, _, banner = make_controller(
            "Bob\n3\nstone\nstone\n", [Move.PAPER, Move.PAPER]
        )
        state = controller.run()
        self.assertEqual((state.player_wins, state.computer_wins), (0, 2))
        message = banner.show.call_args.args[0]
        self.assertTrue(message.endswith("\nComputer   wins !"))

    def test_round_renders_art_side_by_side(self):
        controller, console, _ = make_controller("Ada\n1\npaper\n", [Move.STONE])
        controller.run()
        lines = console.stdout.getvalue().splitlines()
        expected = [
            p + v + c for p, v, c in zip(MOVE_ART[Move.PAPER], VS, MOVE_ART[Move.STONE])
        ]
        start = lines.index(expected[0])
        self.assertEqual(lines[start:start + ART_HEIGHT], expected)

    def test_invalid_best_of_aborts_before_any_round(self):
        controller, console, banner = make_controller("Ada\n4\nstone\n", [])
        with self.assertRaises(InputError):
            controller.run()
        self.assertEqual(controller.phase, Phase.ABORTED)
        self.assertNotIn("Stone, Paper or Scissors", console.stdout.getvalue())
        banner.show.assert_not_called()

    def test_exhausted_retries_propagate(self):
        controller, _, banner = make_controller("Ada\n3\n" + "rock\n" * 5, [])
        with self.assertRaises(ExhaustedRetries):
            controller.run()
        self.assertEqual(controller.state.rounds_played, 0)
        banner.show.assert_not_called()

    def test_cannot_play_before_setup(self):
        controller, _, _ = make_controller("", [])
        with self.assertRaises(RuntimeError):
            controller.play_round()

    def test_never_more_decisive_rounds_than_best_of(self):
        moves = [Move.STONE, Move.PAPER, Move.SCISSORS] * 20
        computer = [Move.SCISSORS, Move.SCISSORS, Move.STONE] * 20
        text = "Ada\n5\n" + "".join(m.value + "\n" for m in moves)
        controller, _, _ = make_controller(text, computer)
        state = controller.run()
        self.assertLessEqual(state.player_wins + state.computer_wins, 5)
        self.assertEqual(max(state.player_wins, state.computer_wins), 3)


if __name__ == '__main__':
    unittest.main()
