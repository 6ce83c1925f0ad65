import unittest

from elevator_sequencer.move_command import MoveCommand
from elevator_sequencer.strategy.same_direction import MoveByRequestsInSameDirection
from elevator_sequencer.strategy.single_request import MoveBySingleRequest


def commands(*pairs):
    return [MoveCommand(origin, destination) for origin, destination in pairs]


class MoveBySingleRequestTest(unittest.TestCase):
    def setUp(self):
        self.strategy = MoveBySingleRequest()

    def test_none_commands(self):
        with self.assertRaises(ValueError):
            self.strategy.get_move_sequence(None)

    def test_empty_commands(self):
        self.assertEqual(self.strategy.get_move_sequence([]), [])

    def test_single_request(self):
        self.assertEqual(self.strategy.get_move_sequence(commands((8, 1))), [8, 1])

    def test_pick_up_same_as_drop_off(self):
        self.assertEqual(self.strategy.get_move_sequence(commands((10, 8), (8, 1))), [10, 8, 1])

    def test_multiple_ascending_moves(self):
        self.assertEqual(
            self.strategy.get_move_sequence(commands((2, 4), (3, 7), (5, 11))),
            [2, 4, 3, 7, 5, 11],
        )

    def test_multiple_descending_moves(self):
        self.assertEqual(
            self.strategy.get_move_sequence(commands((13, 4), (7, 3), (5, 4))),
            [13, 4, 7, 3, 5, 4],
        )

    def test_ascending_then_descending(self):
        self.assertEqual(self.strategy.get_move_sequence(commands((3, 40), (39, 2))), [3, 40, 39, 2])

    def test_descending_then_ascending(self):
        self.assertEqual(self.strategy.get_move_sequence(commands((13, 4), (7, 12))), [13, 4, 7, 12])

    def test_repeated_pickups(self):
        self.assertEqual(
            self.strategy.get_move_sequence(commands((9, 1), (1, 5), (1, 6), (1, 5))),
            [9, 1, 5, 1, 6, 1, 5],
        )


class MoveByRequestsInSameDirectionTest(unittest.TestCase):
    def setUp(self):
        self.strategy = MoveByRequestsInSameDirection()

    def test_none_commands(self):
        with self.assertRaises(ValueError):
            self.strategy.get_move_sequence(None)

    def test_empty_commands(self):
        self.assertEqual(self.strategy.get_move_sequence([]), [])

    def test_single_request(self):
        self.assertEqual(self.strategy.get_move_sequence(commands((8, 1))), [8, 1])

    def test_pick_up_same_as_drop_off(self):
        self.assertEqual(self.strategy.get_move_sequence(commands((10, 8), (8, 1))), [10, 8, 1])

    def test_multiple_ascending_moves_form_one_sweep(self):
        self.assertEqual(
            self.strategy.get_move_sequence(commands((2, 4), (3, 7), (5, 11))),
            [2, 3, 4, 5, 7, 11],
        )

    def test_multiple_descending_moves_form_one_sweep(self):
        self.assertEqual(
            self.strategy.get_move_sequence(commands((13, 4), (7, 3), (5, 4))),
            [13, 7, 5, 4, 3],
        )

    def test_ascending_then_descending(self):
        self.assertEqual(self.strategy.get_move_sequence(commands((3, 40), (39, 2))), [3, 40, 39, 2])

    def test_descending_then_ascending(self):
        self.assertEqual(self.strategy.get_move_sequence(commands((13, 4), (7, 12))), [13, 4, 7, 12])

    def test_pickup_at_pivot_floor_is_not_repeated(self):
        self.assertEqual(
            self.strategy.get_move_sequence(commands((9, 1), (1, 5), (1, 6), (1, 5))),
            [9, 1, 5, 6],
        )

    def test_pivot_applies_to_whole_run(self):
        self.assertEqual(
            self.strategy.get_move_sequence(commands((2, 4), (4, 1), (4, 2), (6, 8))),
            [2, 4, 2, 1, 6, 8],
        )

    def test_floors_repeat_across_non_adjacent_runs(self):
        self.assertEqual(
            self.strategy.get_move_sequence(commands((1, 5), (5, 2), (2, 5))),
            [1, 5, 2, 5],
        )

    def test_same_direction_order_does_not_matter(self):
        forward = commands((2, 4), (3, 7), (5, 11))
        self.assertEqual(
            self.strategy.get_move_sequence(forward),
            self.strategy.get_move_sequence(list(reversed(forward))),
        )

    def test_every_floor_is_visited(self):
        scenario = commands((7, 2), (3, 1), (4, 9), (12, 6), (6, 11))
        stops = self.strategy.get_move_sequence(scenario)
        touched = {floor for command in scenario for floor in (command.originating_floor, command.destination_floor)}
        self.assertTrue(touched.issubset(stops))
        self.assertGreaterEqual(len(stops), len(touched))

    def test_does_not_mutate_input(self):
        scenario = commands((3, 40), (39, 2))
        self.strategy.get_move_sequence(scenario)
        self.assertEqual(scenario, commands((3, 40), (39, 2)))


if __name__ == "__main__":
    unittest.main()
