"""
牌组配置(DeckConfig)和日志工具单元测试
测试配置创建、验证、环境变量读取以及create_deck工厂函数
"""

import logging

import pytest

from card_deck import (
    Deck,
    DeckConfig,
    DeckConfigError,
    SeededRandomSource,
    SystemRandomSource,
    create_deck,
    setup_logging,
)
from card_deck.config import ENV_DETAILED_LOGGING, ENV_LOG_LEVEL, ENV_SEED


@pytest.mark.unit
class TestDeckConfig:
    """牌组配置测试"""

    def test_defaults(self):
        config = DeckConfig()
        assert config.random_seed is None
        assert config.log_level == 'INFO'
        assert config.detailed_logging is False
        assert not config.is_deterministic

    def test_log_level_is_normalized(self):
        assert DeckConfig(log_level='debug').log_level == 'DEBUG'

    @pytest.mark.parametrize("level", ['LOUD', '', 10])
    def test_invalid_log_level(self, level):
        with pytest.raises(DeckConfigError):
            DeckConfig(log_level=level)

    @pytest.mark.parametrize("seed", [1.5, True, ['a']])
    def test_invalid_seed(self, seed):
        with pytest.raises(DeckConfigError):
            DeckConfig(random_seed=seed)

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            DeckConfig(log_level='LOUD')

    def test_build_random_source(self):
        assert isinstance(DeckConfig().build_random_source(), SystemRandomSource)
        seeded = DeckConfig(random_seed='table-1').build_random_source()
        assert isinstance(seeded, SeededRandomSource)
        assert seeded.seed == 'table-1'


@pytest.mark.unit
class TestDeckConfigFromEnv:
    """环境变量读取测试"""

    def test_reads_all_values(self):
        config = DeckConfig.from_env({
            ENV_SEED: '42',
            ENV_LOG_LEVEL: 'debug',
            ENV_DETAILED_LOGGING: 'yes',
        })
        assert config.random_seed == 42
        assert config.log_level == 'DEBUG'
        assert config.detailed_logging is True

    def test_string_seed(self):
        assert DeckConfig.from_env({ENV_SEED: 'abc'}).random_seed == 'abc'

    @pytest.mark.parametrize("raw_seed", ['--5', '²', '1.5'])
    def test_non_integer_seed_kept_as_string(self, raw_seed):
        """测试无法解析为整数的种子按字符串使用"""
        assert DeckConfig.from_env({ENV_SEED: raw_seed}).random_seed == raw_seed

    def test_negative_integer_seed(self):
        assert DeckConfig.from_env({ENV_SEED: '-12'}).random_seed == -12

    def test_empty_environment(self):
        config = DeckConfig.from_env({})
        assert config == DeckConfig()

    @pytest.mark.parametrize("flag", ['0', 'false', 'no', ''])
    def test_detailed_logging_off(self, flag):
        assert DeckConfig.from_env({ENV_DETAILED_LOGGING: flag}).detailed_logging is False

    def test_invalid_level_from_env(self):
        with pytest.raises(DeckConfigError):
            DeckConfig.from_env({ENV_LOG_LEVEL: 'chatty'})

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv(ENV_SEED, '7')
        monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
        monkeypatch.delenv(ENV_DETAILED_LOGGING, raising=False)
        assert DeckConfig.from_env().random_seed == 7


@pytest.mark.unit
class TestCreateDeck:
    """create_deck工厂函数测试"""

    def test_default_config(self):
        deck = create_deck(['a', 'b'])
        assert isinstance(deck, Deck)
        assert deck.top(2) == ['a', 'b']
        assert isinstance(deck.random_source, SystemRandomSource)

    def test_seeded_decks_shuffle_identically(self):
        config = DeckConfig(random_seed=2024)
        cards = list(range(20))
        assert create_deck(cards, config).shuffle().top(20) == create_deck(cards, config).shuffle().top(20)

    def test_logs_fixed_seed(self, caplog):
        with caplog.at_level(logging.INFO, logger='card_deck'):
            create_deck(['a'], DeckConfig(random_seed=5))
        assert any('[创建牌组]' in record.getMessage() for record in caplog.records)

    @pytest.mark.parametrize("level, expected", [('ERROR', logging.ERROR), ('debug', logging.DEBUG)])
    def test_applies_log_level(self, level, expected):
        """测试配置的日志级别作用于card_deck日志记录器"""
        create_deck(['a'], DeckConfig(log_level=level))
        assert logging.getLogger('card_deck').getEffectiveLevel() == expected

    def test_error_level_silences_info(self, caplog):
        caplog.set_level(logging.DEBUG)
        create_deck(['a'], DeckConfig(random_seed=5, log_level='ERROR'))
        assert not any('[创建牌组]' in record.getMessage() for record in caplog.records)

    def test_apply_logging_returns_package_logger(self):
        package_logger = DeckConfig(log_level='WARNING').apply_logging()
        assert package_logger.name == 'card_deck'
        assert package_logger.level == logging.WARNING

    def test_detailed_logging_passed_to_deck(self, caplog):
        deck = create_deck(['a', 'b'], DeckConfig(detailed_logging=True))
        with caplog.at_level(logging.DEBUG, logger='card_deck'):
            deck.draw()
        assert any('[抽牌]' in record.getMessage() for record in caplog.records)


@pytest.mark.unit
class TestSetupLogging:
    """日志设置测试"""

    def test_sets_package_level(self):
        package_logger = setup_logging('debug')
        assert package_logger.name == 'card_deck'
        assert package_logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        assert setup_logging('chatty').level == logging.INFO
