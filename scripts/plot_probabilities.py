"""
Draw the pairwise win-probability matrix of a dice set as a heatmap.
Cell (row i, column j) is the chance that die i throws strictly higher than die j.
Usage: python scripts/plot_probabilities.py 2,2,4,4,9,9 1,1,6,6,8,8 3,3,5,5,7,7 --out data/win_matrix.png
"""
import os
import argparse

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from nontransitive_dice.core.dice import parse_dice
from nontransitive_dice.core.probability import win_probability


def win_matrix(dice):
    return [[win_probability(a, b) if i != j else 0.0 for j, b in enumerate(dice)] for i, a in enumerate(dice)]


def plot_matrix(dice, out_path: str):
    matrix = win_matrix(dice)
    labels = [str(d) for d in dice]
    size = max(4, len(dice) * 1.5)
    fig, ax = plt.subplots(figsize=(size + 1, size))
    im = ax.imshow(matrix, cmap='RdYlGn', vmin=0.0, vmax=1.0)
    ax.set_xticks(range(len(dice)))
    ax.set_yticks(range(len(dice)))
    ax.set_xticklabels(labels, rotation=45, ha='right', fontsize=8)
    ax.set_yticklabels(labels, fontsize=8)
    ax.set_xlabel('Opponent die')
    ax.set_ylabel('Die')
    for i, row in enumerate(matrix):
        for j, val in enumerate(row):
            if i != j:
                ax.text(j, i, f"{val * 100:.1f}%", ha='center', va='center', fontsize=8)
    fig.colorbar(im, ax=ax, label='Win probability')
    ax.set_title('Pairwise win probability')
    fig.tight_layout()
    fig.savefig(out_path)
    plt.close(fig)


def main():
    parser = argparse.ArgumentParser(description="Plot the win-probability matrix of a dice set.")
    parser.add_argument('dice', nargs='+', help='Dice, faces separated by commas')
    parser.add_argument('--out', default=os.path.join('data', 'win_matrix.png'), help='Output PNG path')
    args = parser.parse_args()

    dice = parse_dice(args.dice)
    out_dir = os.path.dirname(args.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    plot_matrix(dice, args.out)
    print(f"[Win matrix saved to {args.out}]")


if __name__ == '__main__':
    main()
