from pydantic_settings import BaseSettings

from smartlog.modes import LogMode


class Settings(BaseSettings):
    # Mode
    mode: LogMode = LogMode.DEBUG_UNTOUCHED

    # Entry/exit tracing
    entry_exit_enabled: bool = True

    # Selective debugging
    selective_debugging: bool = False
    tags_to_debug: set[str] = set()  # JSON list in env, e.g. '["Foo","Bar"]'

    # Logging backend
    log_level: str = "VERBOSE"
    log_dir: str = "logs"
    log_json: bool = False

    model_config = {"env_prefix": "SMARTLOG_", "env_file": ".env", "extra": "ignore"}


settings = Settings()
