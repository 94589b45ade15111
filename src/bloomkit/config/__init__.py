from bloomkit.config.settings import CONFIG, BloomConfig, load_config, setup_logging

__all__ = ["CONFIG", "BloomConfig", "load_config", "setup_logging"]
