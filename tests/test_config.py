from iris_mlp.config import (
    get_data_config,
    get_files_config,
    get_logging_config,
    get_training_config,
    load_config,
)


def test_shipped_config_values():
    data = get_data_config()
    assert data == {'test_fraction': 0.2, 'split_seed': 3}
    training = get_training_config()
    assert training['iterations'] == 100000
    assert training['learning_rate'] == 0.01
    assert training['init_seed'] == 1
    assert isinstance(training['log_every'], int)
    assert get_files_config()['output'] == 'output/'
    assert get_logging_config()['level'] == 'INFO'


def test_missing_file_falls_back_to_defaults(tmp_path):
    cfg = load_config(str(tmp_path / "missing.ini"))
    assert get_training_config(cfg) == {
        'iterations': 100000,
        'learning_rate': 0.01,
        'init_seed': 1,
        'log_every': 10000,
    }
    assert get_data_config(cfg)['split_seed'] == 3


def test_custom_config_overrides(tmp_path):
    path = tmp_path / "custom.ini"
    path.write_text("[TRAINING]\niterations = 500\nlearning_rate = 0.1\n\n[LOGGING]\nlevel = debug\n")
    cfg = load_config(str(path))
    training = get_training_config(cfg)
    assert training['iterations'] == 500
    assert training['learning_rate'] == 0.1
    assert training['init_seed'] == 1
    assert get_logging_config(cfg)['level'] == 'DEBUG'
