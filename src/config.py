import copy
import logging
import os

import yaml

logger = logging.getLogger(__name__)

# config.yaml.example 과 동일한 기본 설정
DEFAULT_CONFIG = {
    'server': {
        'host': '0.0.0.0',
        'port': 3000,
    },
    'store': {
        'allow_duplicate_ids': True,  # 원본 동작: 중복 id 허용, 조회는 첫 번째 항목
    },
    'logging': {
        'level': 'INFO',
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    },
}


class Config:
    _instance = None
    _config = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Config, cls).__new__(cls)
            cls._instance._load_config()
        return cls._instance

    def _load_config(self, config_path=None):
        """Load configuration from config.yaml or fall back to defaults."""
        self._config = copy.deepcopy(DEFAULT_CONFIG)

        if config_path is None:
            project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
            config_path = os.path.join(project_root, 'config.yaml')

        if os.path.exists(config_path):
            try:
                with open(config_path, 'r', encoding='utf-8') as f:
                    user_config = yaml.safe_load(f)
                    if user_config:
                        self._merge_config(self._config, user_config)
                logger.info(f"Loaded configuration from {config_path}")
            except (OSError, yaml.YAMLError) as e:
                logger.error(f"Failed to load config.yaml: {e}. Using defaults.")
        else:
            logger.info("config.yaml not found. Using default configuration.")

        port = os.getenv("PORT")
        if port:
            self._config['server']['port'] = int(port)

    def _merge_config(self, default, user):
        """Recursively merge dictionary user_config into default_config."""
        for key, value in user.items():
            if isinstance(value, dict) and key in default and isinstance(default[key], dict):
                self._merge_config(default[key], value)
            else:
                default[key] = value

    def reload(self, config_path=None):
        """설정 파일을 다시 읽음 (테스트 및 런타임 변경용)"""
        self._load_config(config_path)

    def get(self, section, key=None, default=None):
        """
        Get a configuration value.
        Usage: config.get('server', 'port') or config.get('store')
        """
        if section not in self._config:
            return default

        if key is None:
            return self._config[section]

        return self._config[section].get(key, default)

    def set(self, section, key, value):
        self._config.setdefault(section, {})[key] = value


# Global accessor
config = Config()
