# iris_mlp/config.py
import configparser
import os

CONFIG_PATH = os.path.join(os.path.dirname(__file__), 'config.ini')


def load_config(path=None):
    config = configparser.ConfigParser()
    config.read(path or CONFIG_PATH)
    return config


config = load_config()


def get_data_config(cfg=None):
    cfg = cfg or config
    return {
        'test_fraction': cfg.getfloat('DATA', 'test_fraction', fallback=0.2),
        'split_seed': cfg.getint('DATA', 'split_seed', fallback=3),
    }


def get_training_config(cfg=None):
    cfg = cfg or config
    return {
        'iterations': cfg.getint('TRAINING', 'iterations', fallback=100000),
        'learning_rate': cfg.getfloat('TRAINING', 'learning_rate', fallback=0.01),
        'init_seed': cfg.getint('TRAINING', 'init_seed', fallback=1),
        'log_every': cfg.getint('TRAINING', 'log_every', fallback=10000),
    }


def get_files_config(cfg=None):
    cfg = cfg or config
    return {
        'output': cfg.get('FILES', 'output', fallback='output/'),
    }


def get_logging_config(cfg=None):
    cfg = cfg or config
    return {
        'level': cfg.get('LOGGING', 'level', fallback='INFO').upper(),
    }
