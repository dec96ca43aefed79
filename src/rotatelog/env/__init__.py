from rotatelog.env.env import (
    COMPRESSORS,
    ConfigError,
    Environment,
    LoggingEnvironment,
    env_file_path,
    get_env,
    get_logging_env,
    reset_env_caches,
)

__all__ = [
    "COMPRESSORS",
    "ConfigError",
    "Environment",
    "LoggingEnvironment",
    "env_file_path",
    "get_env",
    "get_logging_env",
    "reset_env_caches",
]
