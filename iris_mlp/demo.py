"""
demo.py
-------
Train the hand-written 4-3-3 network on Iris and report test accuracy.

Defaults come from config.ini; any of them can be overridden on the command
line.

Example
-------
iris-mlp --iterations 20000 --lr 0.01 --compare

After running, the output folder contains:
  results.csv   (actual / predicted species per test row)
  loss.png      (cost per iteration)
  debug.log
"""
from __future__ import annotations
import argparse
import logging
import os
import sys

import matplotlib.pyplot as plt
import numpy as np

from iris_mlp import config as cfg
from iris_mlp.data import load_iris_split
from iris_mlp.network import uniform_init
from iris_mlp.plotting import plot_loss
from iris_mlp.prediction import UNCLASSIFIED, accuracy, predict
from iris_mlp.reference import compare_with_reference, results_table
from iris_mlp.training import train
from iris_mlp.utils import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Hand-written MLP for Iris species classification")
    p.add_argument("--config", default=None, help="Path to an alternative config.ini")
    p.add_argument("--iterations", type=int, default=None, help="Gradient descent iterations")
    p.add_argument("--lr", type=float, default=None, help="Learning rate")
    p.add_argument("--init_seed", type=int, default=None, help="Seed for the uniform weight initialization")
    p.add_argument("--split_seed", type=int, default=None, help="Seed for the train/test split")
    p.add_argument("--output_dir", default=None, help="Where to write results.csv, loss.png and debug.log")
    p.add_argument("--compare", action="store_true", help="Also fit scikit-learn's MLPClassifier on the same split")
    p.add_argument("--progress", action="store_true", help="Show a progress bar while training")
    return p.parse_args(argv)


def run(args: argparse.Namespace) -> float:
    conf = cfg.load_config(args.config) if args.config else cfg.config
    data_conf = cfg.get_data_config(conf)
    train_conf = cfg.get_training_config(conf)
    output_dir = args.output_dir or cfg.get_files_config(conf)['output']

    iterations = train_conf['iterations'] if args.iterations is None else args.iterations
    lr = train_conf['learning_rate'] if args.lr is None else args.lr
    init_seed = train_conf['init_seed'] if args.init_seed is None else args.init_seed
    split_seed = data_conf['split_seed'] if args.split_seed is None else args.split_seed

    split = load_iris_split(data_conf['test_fraction'], split_seed)
    params = uniform_init(np.random.default_rng(init_seed))
    losses = train(split.X_train, split.Y_train, params,
                   iterations=iterations, lr=lr,
                   log_every=train_conf['log_every'], progress=args.progress)

    y_pred = predict(split.X_test, params)
    acc = accuracy(y_pred, split.Y_test)
    n_unclassified = int(np.sum(y_pred == UNCLASSIFIED))
    logger.info(f"Test accuracy: {acc:.3f} ({n_unclassified} unclassified of {len(y_pred)})")

    if args.compare:
        table = compare_with_reference(split, y_pred, seed=init_seed).table
    else:
        table = results_table(split, y_pred)
    os.makedirs(output_dir, exist_ok=True)
    table.to_csv(os.path.join(output_dir, "results.csv"), index=False)
    fig = plot_loss(losses, os.path.join(output_dir, "loss.png"))
    plt.close(fig)
    return acc


def main(argv=None) -> int:
    args = parse_args(argv)
    conf = cfg.load_config(args.config) if args.config else cfg.config
    output_dir = args.output_dir or cfg.get_files_config(conf)['output']
    setup_logging(cfg.get_logging_config(conf)['level'], os.path.join(output_dir, "debug.log"))
    try:
        run(args)
    except Exception as e:
        logger.exception(f"Run failed: {type(e).__name__}: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
