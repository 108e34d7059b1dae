"""
Play many simulated games between the house and every registered agent, then save the
aggregated results and a win% chart.
Usage: python scripts/run_tournament.py --dice 2,2,4,4,9,9 1,1,6,6,8,8 3,3,5,5,7,7 --games 200 --data-dir data
"""
import os
import argparse
import csv
import random
from collections import defaultdict
from typing import Dict, List

try:
    import matplotlib
    matplotlib.use('Agg')
    import matplotlib.pyplot as plt
    _PLOTTING_AVAILABLE = True
except Exception:
    plt = None
    _PLOTTING_AVAILABLE = False

from nontransitive_dice.agents import AGENT_MAP, create_agent
from nontransitive_dice.channels.agent_channel import AgentChannel
from nontransitive_dice.core.config import GameConfig
from nontransitive_dice.core.dice import parse_dice
from nontransitive_dice.core.engine import GameEngine
from nontransitive_dice.core.state import COMPUTER, COUNTERPART, TIE

DEFAULT_DICE = ["2,2,4,4,9,9", "1,1,6,6,8,8", "3,3,5,5,7,7"]
SUMMARY_HEADER = ["agent", "games", "wins", "losses", "ties", "win_pct", "loss_pct", "tie_pct"]


def run_matches(agent_name: str, dice, cfg: GameConfig, games: int, seed: int = None) -> Dict[str, int]:
    """
    Play `games` games with `agent_name` as the counterpart.
    Returns:
        dict: Counts keyed by 'wins', 'losses', 'ties' from the agent's point of view.
    """
    stats = defaultdict(int)
    rng = random.Random(seed)
    for _ in range(games):
        agent = create_agent(agent_name, rng=random.Random(rng.getrandbits(32)))
        house = create_agent(cfg.house_agent, rng=random.Random(rng.getrandbits(32)))
        engine = GameEngine(dice, AgentChannel(agent), config=cfg, house=house)
        outcome = engine.play()
        if outcome.winner == COUNTERPART:
            stats['wins'] += 1
        elif outcome.winner == COMPUTER:
            stats['losses'] += 1
        elif outcome.winner == TIE:
            stats['ties'] += 1
    return stats


def summary_rows(results: Dict[str, Dict[str, int]], games: int) -> List[dict]:
    rows = []
    for name in sorted(results):
        s = results[name]
        rows.append({
            'agent': name,
            'games': games,
            'wins': s['wins'],
            'losses': s['losses'],
            'ties': s['ties'],
            'win_pct': s['wins'] / games * 100.0,
            'loss_pct': s['losses'] / games * 100.0,
            'tie_pct': s['ties'] / games * 100.0,
        })
    return rows


def write_rows_to_csv(rows: List[dict], path: str, header: List[str]):
    with open(path, 'w', newline='', encoding='utf-8') as f:
        writer = csv.DictWriter(f, fieldnames=header)
        writer.writeheader()
        for r in rows:
            writer.writerow(r)


def plot_win_percentages(rows: List[dict], out_path: str):
    if not _PLOTTING_AVAILABLE:
        print(f"matplotlib not available; skipping plot generation: {out_path}")
        return

    agents = [r['agent'] for r in rows]
    win_perc = [r['win_pct'] for r in rows]
    width = max(6, int(len(agents) * 0.6))
    plt.figure(figsize=(width, 4))
    bars = plt.bar(agents, win_perc, color='C0')
    plt.ylabel('Win percentage vs house (%)')
    plt.ylim(0, 100)
    plt.title('Tournament: counterpart win% per agent')
    for rect, val in zip(bars, win_perc):
        plt.text(rect.get_x() + rect.get_width() / 2.0, rect.get_height() + 1.0, f"{val:.1f}%", ha='center', va='bottom', fontsize=8)
    plt.tight_layout()
    plt.savefig(out_path)
    plt.close()


def main():
    parser = argparse.ArgumentParser(description="Simulate games between the house and each registered agent.")
    parser.add_argument('--dice', nargs='+', default=DEFAULT_DICE, help='Dice, faces separated by commas')
    parser.add_argument('--agents', nargs='+', default=['all'], help="Agent names, or 'all'")
    parser.add_argument('--games', type=int, default=200, help='Games per agent')
    parser.add_argument('--seed', type=int, default=None, help='Seed for house and agent die picking')
    parser.add_argument('--data-dir', default='data', help='Output directory')
    args = parser.parse_args()

    cfg = GameConfig(rng_seed=args.seed)
    dice = parse_dice(args.dice, cfg)
    agent_names = sorted(AGENT_MAP) if args.agents == ['all'] else args.agents

    results = {}
    for name in agent_names:
        if name not in AGENT_MAP:
            raise SystemExit(f"Unknown agent: {name}")
        print(f"Playing {args.games} games: house vs {name}")
        results[name] = run_matches(name, dice, cfg, args.games, seed=args.seed)

    rows = summary_rows(results, args.games)
    for r in rows:
        print(f"{r['agent']:>10}: win {r['win_pct']:.1f}%  loss {r['loss_pct']:.1f}%  tie {r['tie_pct']:.1f}%")

    os.makedirs(args.data_dir, exist_ok=True)
    summary_csv = os.path.join(args.data_dir, 'tournament_summary.csv')
    write_rows_to_csv(rows, summary_csv, SUMMARY_HEADER)
    print(f"[Summary saved to {summary_csv}]")
    plot_win_percentages(rows, os.path.join(args.data_dir, 'win_percentages.png'))


if __name__ == '__main__':
    main()
