import os
from dataclasses import dataclass


def _flag(name: str, default: str = 'false') -> bool:
    return os.environ.get(name, default).strip().lower() in {'1', 'true', 'yes', 'on'}


@dataclass
class Settings:
    APP_NAME: str = os.environ.get('APP_NAME', 'Password Generator Service')
    LOG_LEVEL: str = os.environ.get('LOG_LEVEL', 'INFO')
    TEMPLATE_DIR: str = os.environ.get('TEMPLATE_DIR', 'templates')
    HOST: str = os.environ.get('HOST', '0.0.0.0')
    PORT: int = int(os.environ.get('PORT', '8000'))
    SECURE_RANDOM: bool = _flag('PASSGEN_SECURE_RANDOM')

    @property
    def template_path(self) -> str:
        """Template directory resolved against the package when relative."""
        if os.path.isabs(self.TEMPLATE_DIR):
            return self.TEMPLATE_DIR
        package_dir = os.path.dirname(os.path.dirname(__file__))
        return os.path.join(package_dir, self.TEMPLATE_DIR)


def get_settings() -> Settings:
    return Settings()
