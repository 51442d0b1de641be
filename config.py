"""
config.py — Application Configuration
======================================
Loaded with `app.config.from_object(DefaultConfig)`.  Every key can be
overridden by a mapping passed to create_app() or by a DSAVIZ_-prefixed
environment variable (values are parsed as JSON when possible):

    DSAVIZ_DEFAULT_SPEED=70 DSAVIZ_RANDOM_SEED=42 flask --app main run
"""

import secrets


class DefaultConfig:
    SECRET_KEY        = secrets.token_hex(32)

    # playback
    DEFAULT_SPEED     = 30          # 1–100, "medium"

    # initial data
    SORT_ARRAY_SIZE   = 20
    SEARCH_ARRAY_SIZE = 20
    HASH_TABLE_SIZE   = 10
    RANDOM_SEED       = None        # int for reproducible arrays / layouts

    LOG_LEVEL         = "INFO"


class TestingConfig(DefaultConfig):
    TESTING           = True
    SECRET_KEY        = "testing"
    RANDOM_SEED       = 7
    SORT_ARRAY_SIZE   = 8
    SEARCH_ARRAY_SIZE = 8
    LOG_LEVEL         = "WARNING"
