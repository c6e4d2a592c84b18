import pytest
import yaml

from grater.config import ConfigManager, MIN_DELAY, MAX_DELAY
from grater.errors import ConfigurationError


def test_defaults_when_file_missing(tmp_path):
    config = ConfigManager(str(tmp_path / "missing.yaml"))
    assert config.get_delay_range() == (MIN_DELAY, MAX_DELAY) == (2, 30)
    assert config.get_window_title() == "grater"
    assert config.get_log_file_path() is None


def test_required_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigManager(str(tmp_path / "missing.yaml"), required=True)


def test_file_values_override_defaults(tmp_path):
    path = tmp_path / "grater.yaml"
    path.write_text(yaml.dump({'delay': {'max_seconds': 10}, 'logging': {'log_file': 'logs/g.log'}}))
    config = ConfigManager(str(path))
    assert config.get_delay_range() == (2, 10)
    assert config.get('logging.level') == 'INFO'
    assert str(config.get_log_file_path()) == 'logs/g.log'


def test_non_mapping_root_rejected(tmp_path):
    path = tmp_path / "grater.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ValueError):
        ConfigManager(str(path))


def test_set_get_and_save_round_trip(tmp_path):
    path = tmp_path / "conf" / "grater.yaml"
    config = ConfigManager(str(path))
    config.set('window.title', 'busy')
    config.set('extra.nested.key', 1)
    config.save_config()

    reloaded = ConfigManager(str(path), required=True)
    assert reloaded.get_window_title() == 'busy'
    assert reloaded.get('extra.nested.key') == 1
    assert reloaded.get('extra.missing', 'fallback') == 'fallback'


@pytest.mark.parametrize("min_delay, max_delay", [
    (5, 5),
    (10, 3),
    (-1, 3),
    ("2", 30),
    (2, 30.5),
    (True, 30),
])
def test_invalid_delays(config, min_delay, max_delay):
    config.set('delay.min_seconds', min_delay)
    config.set('delay.max_seconds', max_delay)
    with pytest.raises(ConfigurationError):
        config.validate_delays()


def test_zero_min_delay_allowed(config):
    config.set('delay.min_seconds', 0)
    config.set('delay.max_seconds', 1)
    assert config.get_delay_range() == (0, 1)


def test_logging_settings_valid_by_default(config):
    config.validate_logging()


@pytest.mark.parametrize("key, value", [
    ('logging.level', 10),
    ('logging.level', 'LOUD'),
    ('logging.max_log_size_mb', '50'),
    ('logging.backup_count', -1),
])
def test_invalid_logging_settings(config, key, value):
    config.set(key, value)
    with pytest.raises(ConfigurationError):
        config.validate_logging()


def test_lowercase_log_level_accepted(config):
    config.set('logging.level', 'debug')
    config.validate_logging()
