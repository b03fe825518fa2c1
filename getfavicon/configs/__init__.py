"""Configuration for getfavicon"""

import pathlib

from dynaconf import Dynaconf, Validator

# Validators for Get Favicon settings.
_validators = [
    Validator("logging.format", is_in=["mozlog", "pretty"]),
    Validator("logging.level", is_in=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    Validator("logging.can_propagate", is_type_of=bool),
    Validator("metrics.dev_logger", is_type_of=bool),
    Validator("metrics.host", is_type_of=str),
    Validator("metrics.port", gte=0, is_type_of=int),
    Validator("favicon.default_icon_path", is_type_of=str, must_exist=True),
    Validator("favicon.cache.backend", is_in=["filesystem", "none"]),
    # The cache directory is required when results are persisted on disk.
    Validator(
        "favicon.cache.directory",
        is_type_of=str,
        must_exist=True,
        when=Validator("favicon.cache.backend", must_exist=True, eq="filesystem"),
    ),
    Validator(
        "favicon.http.connect_timeout_sec",
        "favicon.http.request_timeout_sec",
        "favicon.http.pool_timeout_sec",
        is_type_of=(int, float),
        gt=0,
    ),
    Validator("favicon.http.max_connections", is_type_of=int, gte=1),
    Validator("web.host", is_type_of=str),
    Validator("web.port", is_type_of=int, gte=0),
    Validator("sentry.env", is_in=["prod", "stage", "dev"]),
    Validator("sentry.mode", is_in=["disabled", "release", "debug"]),
    Validator("sentry.traces_sample_rate", gte=0, lte=1),
]

# `root_path` = The directory holding the settings files below.
# `envvar_prefix` = Export envvars with `export GETFAVICON_FOO=bar`.
# `settings_files` = Load these files in the order.
# `environments` = Enable layered environments such as `development`, `production`, `testing` etc.
# `env_switcher` = Switch environments by `export GETFAVICON_ENV=production`. Default: `development`.
# `merge_enabled` = Merge nested tables of an environment into the defaults.
# `validators` = Define validators for Get Favicon settings.

settings = Dynaconf(
    root_path=str(pathlib.Path(__file__).parent),
    envvar_prefix="GETFAVICON",
    settings_files=[
        "default.toml",
        "development.toml",
        "production.toml",
        "ci.toml",
        "testing.toml",
    ],
    environments=True,
    env_switcher="GETFAVICON_ENV",
    merge_enabled=True,
    validators=_validators,
)
