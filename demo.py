#!/usr/bin/env python3
"""Watch random valid moves play Minesweeper."""
import time
import os

from minesweeper import BoardConfig, MinesweeperEnv
from minesweeper.environment import ACTION_KINDS, FLAG, CHORD


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.3, games: int = 5, size: int = 10, mines: int = 13):
    """Run demo games with visualization."""
    config = BoardConfig(height=size, width=size, num_mines=mines)
    env = MinesweeperEnv(config=config, render_mode="ansi")

    print(f"Board: {size}x{size} with {mines} mines ({100*mines/(size*size):.1f}% density)")
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0

    for game in range(games):
        env.reset()

        clear_screen()
        print(f"=== Game {game + 1}/{games} ===")
        print(f"Wins so far: {wins}\n")
        print(env.render())
        time.sleep(delay)

        done = False
        step = 0

        while not done:
            # Skip flags so the random player makes progress
            mask = env.get_action_mask()
            mask[env.encode_action(FLAG, 0, 0): env.encode_action(CHORD, 0, 0)] = 0
            if not mask.any():
                break
            action = env.action_space.sample(mask=mask)
            kind, row, col = env.decode_action(action)

            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: {ACTION_KINDS[kind]} ({row}, {col})\n")
            print(env.render())

            if done:
                if info.get("outcome") == "WON":
                    wins += 1
                    print("\n*** WIN! ***")
                else:
                    print("\n*** LOST (hit mine) ***")

            time.sleep(delay)

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--size", type=int, default=10, help="Board size (NxN)")
    parser.add_argument("--mines", type=int, default=13, help="Number of mines")
    args = parser.parse_args()

    demo(delay=args.delay, games=args.games, size=args.size, mines=args.mines)
