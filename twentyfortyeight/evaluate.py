# -*- coding: utf-8 -*-
"""
Play games with a random legal-move policy and report the distribution of final max tiles.
"""
import logging
from collections import Counter

from numpy.random import default_rng
from tqdm import trange

from twentyfortyeight.core.gamemove import legal_actions
from twentyfortyeight.envs import GameConfig, TwentyFortyEight


def evaluate(length: int = 10, size: int = 4, seed: int | None = None) -> tuple[dict[int, int], int]:
    """
    Play several games, choosing uniformly among the moves that change the board.

    Parameters
    ----------
    length : int, optional
        The number of games to play (default is 10).
    size : int, optional
        Side length of the board (default is 4).
    seed : int, optional
        Seed shared by the policy and the tile spawns.

    Returns
    -------
    tuple[dict[int, int], int]
        Frequency of each final max tile, and the best score reached.
    """
    rng = default_rng(seed)
    env = TwentyFortyEight(config=GameConfig(size=size), rng=rng)
    max_tiles = []

    with trange(length) as period:
        for num in period:
            board = env.reset()
            terminal = env.is_terminal()

            # ##: Play a game.
            while not terminal:
                actions = legal_actions(board)
                result = env.apply_move(actions[rng.integers(len(actions))])
                board, terminal = result.board, result.terminal

                # ##: Log.
                period.set_description(f"Evaluation: {num + 1}")
                period.set_postfix(score=env.get_score(), max=env.max_tile)

            # ##: Save max cells.
            max_tiles.append(env.max_tile)

    return dict(Counter(max_tiles)), env.get_high_score()


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser(description="Play random 2048 games.")
    parser.add_argument("--games", type=int, default=10)
    parser.add_argument("--size", type=int, default=4)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    frequency, best = evaluate(length=args.games, size=args.size, seed=args.seed)
    print(f"Max tiles: {dict(sorted(frequency.items()))}, best score: {best}")
