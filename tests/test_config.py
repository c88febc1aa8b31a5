"""
설정 및 로거 테스트
"""

import logging

import pytest

from object_fabricator import FabricatorSettings, ObjectFabricator, get_settings, init_settings, reset_settings
from object_fabricator.utils.common import get_logger


class TestSettings:
    def test_기본_설정_확인(self):
        settings = get_settings()

        assert settings == FabricatorSettings(id_field="id", logger_name="object_fabricator")

    def test_id_필드_이름을_바꿀_수_있는지_확인(self, book_fabricator: ObjectFabricator):
        """id_field 설정이 생성된 객체의 키에 반영되는지 확인"""
        init_settings(id_field="pk")

        assert book_fabricator.create() == {"pk": 1, "title": "Book 1"}

    def test_초기화하면_기본값으로_돌아가는지_확인(self):
        init_settings(id_field="pk")

        settings = reset_settings()

        assert settings.id_field == "id"
        assert get_settings() is settings

    @pytest.mark.parametrize("kwargs", [{"id_field": ""}, {"id_field": 1}, {"logger_name": ""}])
    def test_유효하지_않은_설정은_거부되는지_확인(self, kwargs):
        with pytest.raises(ValueError):
            init_settings(**kwargs)

        assert get_settings() == FabricatorSettings()

    def test_알_수_없는_설정은_거부되는지_확인(self):
        with pytest.raises(TypeError):
            init_settings(start_id=10)


class TestLogger:
    def test_설정된_로거_이름을_사용하는지_확인(self):
        init_settings(logger_name="fixtures")

        assert get_logger().name == "fixtures"

    def test_fabricator_로그가_남는지_확인(self, caplog):
        fabricator = ObjectFabricator("User", {"name": "Frodo"})

        with caplog.at_level(logging.DEBUG, logger="object_fabricator"):
            fabricator.create()
            fabricator.clean()

        assert "Fabricated User (id: 1)" in caplog.text
        assert "Cleaned User" in caplog.text
