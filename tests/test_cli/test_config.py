"""Tests for StatsConfig."""

import logging
import os
from unittest.mock import patch

import pytest

from cfkit.config import StatsConfig


class TestStatsConfig:
    """Tests for StatsConfig class."""

    def test_config_defaults(self):
        config = StatsConfig()
        assert config.sparsity_decimals == 5
        assert config.display_overlap is False
        assert config.log_level == "INFO"
        assert config.col_user == "userID"
        assert config.col_item == "itemID"
        assert config.col_rating == "rating"
        assert config.col_timestamp == "timestamp"
        assert config.memo_maxsize is None
        assert config.memo_thread_safe is False

    def test_config_from_env(self):
        with patch.dict(
            os.environ,
            {
                "CFKIT_SPARSITY_DECIMALS": "3",
                "CFKIT_DISPLAY_OVERLAP": "yes",
                "CFKIT_LOG_LEVEL": "debug",
                "CFKIT_COL_USER": "user_id",
                "CFKIT_COL_ITEM": "book_id",
                "CFKIT_MEMO_MAXSIZE": "256",
                "CFKIT_MEMO_THREAD_SAFE": "true",
            },
        ):
            config = StatsConfig.from_env()

        assert config.sparsity_decimals == 3
        assert config.display_overlap is True
        assert config.log_level == "DEBUG"
        assert config.log_level_value == logging.DEBUG
        assert config.col_user == "user_id"
        assert config.col_item == "book_id"
        assert config.memo_maxsize == 256
        assert config.memo_thread_safe is True

    def test_config_from_env_uses_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = StatsConfig.from_env()

        assert config == StatsConfig()

    def test_validate_valid_config(self):
        StatsConfig().validate()

    @pytest.mark.parametrize("decimals", [-1, 16])
    def test_validate_decimals_out_of_range(self, decimals):
        with pytest.raises(ValueError, match="Sparsity decimals"):
            StatsConfig(sparsity_decimals=decimals).validate()

    def test_validate_log_level(self):
        with pytest.raises(ValueError, match="Invalid log level"):
            StatsConfig(log_level="LOUD").validate()

    def test_validate_blank_column(self):
        with pytest.raises(ValueError, match="col_rating cannot be blank"):
            StatsConfig(col_rating=" ").validate()

    def test_validate_same_user_and_item_column(self):
        with pytest.raises(ValueError, match="must differ"):
            StatsConfig(col_user="id", col_item="id").validate()

    def test_empty_memo_maxsize_is_unbounded(self):
        with patch.dict(os.environ, {"CFKIT_MEMO_MAXSIZE": " "}, clear=True):
            config = StatsConfig.from_env()

        assert config.memo_maxsize is None
        config.validate()

    @pytest.mark.parametrize("maxsize", [0, -5])
    def test_validate_memo_maxsize(self, maxsize):
        with pytest.raises(ValueError, match="CFKIT_MEMO_MAXSIZE must be > 0"):
            StatsConfig(memo_maxsize=maxsize).validate()

    def test_memoize_uses_configured_cache(self):
        config = StatsConfig(memo_maxsize=2, memo_thread_safe=True)
        squared = config.memoize(lambda x: x * x)

        assert [squared(n) for n in (1, 2, 3, 1)] == [1, 4, 9, 1]
        info = squared.cache_info()
        assert info.maxsize == 2
        assert info.currsize == 2
        # 1 was evicted by 3 and computed again
        assert info.misses == 4
        assert squared.thread_safe is True

    def test_memoize_default_is_unbounded(self):
        squared = StatsConfig().memoize(lambda x: x * x)

        for n in range(5):
            squared(n)

        assert squared.cache_info().currsize == 5
        assert squared.thread_safe is False
