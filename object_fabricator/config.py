from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class FabricatorSettings:
    id_field: str = field(default="id", metadata={"description": "생성된 객체에서 id가 저장될 키"})
    logger_name: str = field(default="object_fabricator", metadata={"description": "패키지 로거 이름"})

    def validate(self):
        if not isinstance(self.id_field, str) or not self.id_field:
            raise ValueError("id_field must be a non-empty string.")
        if not isinstance(self.logger_name, str) or not self.logger_name:
            raise ValueError("logger_name must be a non-empty string.")


class SettingsHandler:
    """프로세스 전역 설정을 보관하는 싱글톤"""

    _instance: SettingsHandler | None = None
    _settings: FabricatorSettings | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def set_settings(cls, settings: FabricatorSettings) -> None:
        settings.validate()
        cls._settings = settings
        logger = logging.getLogger(settings.logger_name)
        if not logger.handlers:
            logger.addHandler(logging.NullHandler())

    def get_settings(self) -> FabricatorSettings:
        if self._settings is None:
            # 초기화 전이라면 기본값 사용
            self.set_settings(FabricatorSettings())
        return self._settings


def init_settings(**kwargs) -> FabricatorSettings:
    """전역 설정을 초기화합니다.

    지정하지 않은 항목은 기본값을 사용합니다.

    Args:
        **kwargs: FabricatorSettings 필드 (id_field, logger_name)

    Returns:
        FabricatorSettings: 적용된 설정

    Raises:
        ValueError: 설정 값이 유효하지 않은 경우
    """
    settings = replace(FabricatorSettings(), **kwargs)
    SettingsHandler.set_settings(settings)
    return settings


def get_settings() -> FabricatorSettings:
    return SettingsHandler().get_settings()


def reset_settings() -> FabricatorSettings:
    """기본 설정으로 되돌립니다."""
    return init_settings()
