import asyncio
import unittest

from mazegame import GameConfig, GameState, MazeGenerator, RevealAnimator, RevealSequence


class RevealSequenceTests(unittest.TestCase):
    def setUp(self) -> None:
        self.maze = MazeGenerator(9, 7, seed=11).generate()

    def test_carved_cells_start_hidden(self) -> None:
        sequence = RevealSequence(self.maze)
        self.assertEqual(sequence.hidden, frozenset(self.maze.carve_order))
        self.assertEqual(sequence.remaining, len(self.maze.carve_order))
        self.assertFalse(sequence.done)
        self.assertEqual(
            sequence.visible_cells(),
            self.maze.open_cells() - set(self.maze.carve_order),
        )

    def test_steps_follow_carve_order(self) -> None:
        sequence = RevealSequence(self.maze)
        first = sequence.step()
        self.assertEqual(first, self.maze.carve_order[0])
        self.assertFalse(sequence.is_hidden(first))
        self.assertEqual(list(sequence.replay()), list(self.maze.carve_order[1:]))

    def test_full_replay_reveals_every_open_cell(self) -> None:
        sequence = RevealSequence(self.maze)
        for _ in sequence.replay():
            pass
        self.assertTrue(sequence.done)
        self.assertIsNone(sequence.step())
        self.assertEqual(sequence.visible_cells(), self.maze.open_cells())

    def test_reset_hides_everything_again(self) -> None:
        sequence = RevealSequence(self.maze)
        list(sequence.replay())
        sequence.reset()
        self.assertEqual(sequence.index, 0)
        self.assertEqual(sequence.hidden, frozenset(self.maze.carve_order))
        self.assertEqual(list(sequence.replay()), list(self.maze.carve_order))


class RevealAnimatorTests(unittest.IsolatedAsyncioTestCase):
    async def test_replays_carve_order_with_generation(self) -> None:
        state = GameState(GameConfig(width=7, height=7, seed=4))
        events = []
        animator = RevealAnimator(delay=0, on_step=events.append)

        animator.start(state.maze, state.generation)
        await animator.wait()

        self.assertEqual([event.position for event in events], list(state.maze.carve_order))
        self.assertEqual([event.index for event in events], list(range(len(events))))
        self.assertTrue(all(event.generation == state.generation for event in events))
        self.assertFalse(animator.running)

    async def test_new_game_mid_reveal_discards_previous_maze(self) -> None:
        state = GameState(GameConfig(width=7, height=7, seed=8))
        events = []
        animator = RevealAnimator(delay=0, on_step=events.append)
        state.subscribe(animator.on_snapshot)
        animator.on_snapshot(state.snapshot())
        first_generation = state.generation
        first_order = list(state.maze.carve_order)

        while not events:
            await asyncio.sleep(0)
        self.assertLess(len(events), len(first_order))

        state.regenerate()
        mark = len(events)
        await animator.wait()

        later = events[mark:]
        self.assertNotEqual(state.generation, first_generation)
        self.assertTrue(all(event.generation == state.generation for event in later))
        self.assertEqual([event.position for event in later], list(state.maze.carve_order))
        self.assertTrue(all(event.generation == first_generation for event in events[:mark]))

    async def test_moves_do_not_restart_the_reveal(self) -> None:
        state = GameState(GameConfig(width=7, height=7, seed=2))
        animator = RevealAnimator(delay=0)
        state.subscribe(animator.on_snapshot)
        animator.on_snapshot(state.snapshot())
        sequence = animator.sequence

        for direction in ("down", "right", "up", "left"):
            state.move(direction)

        self.assertIs(animator.sequence, sequence)
        await animator.wait()
        self.assertTrue(sequence.done)

    async def test_cancel_stops_events(self) -> None:
        state = GameState(GameConfig(width=9, height=9, seed=1))
        events = []
        animator = RevealAnimator(delay=0, on_step=events.append)
        animator.start(state.maze, state.generation)
        while not events:
            await asyncio.sleep(0)

        animator.cancel()
        count = len(events)
        for _ in range(10):
            await asyncio.sleep(0)

        self.assertEqual(len(events), count)
        self.assertFalse(animator.running)

    def test_negative_delay_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            RevealAnimator(delay=-0.1)


if __name__ == "__main__":
    unittest.main()
