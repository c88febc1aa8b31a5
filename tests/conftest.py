"""
공통 테스트 설정
"""

import logging

import pytest

from object_fabricator import ObjectFabricator, reset_settings
from tests.factories import BookFabricatorFactory, UserFabricatorFactory

# 로깅 설정
logging.basicConfig(level=logging.INFO)


@pytest.fixture(scope="function", autouse=True)
def settings_():
    """테스트마다 기본 설정으로 초기화"""
    settings = reset_settings()
    yield settings
    reset_settings()


@pytest.fixture(scope="function")
def user_fabricator() -> ObjectFabricator:
    """기본 User fabricator, 테스트 종료 시 clean"""
    fabricator = UserFabricatorFactory.create_user_fabricator()
    yield fabricator

    fabricator.clean()
    logging.info("[fixture] User fabricator 초기화")


@pytest.fixture(scope="function")
def book_fabricator() -> ObjectFabricator:
    """기본 Book fabricator, 테스트 종료 시 clean"""
    fabricator = BookFabricatorFactory.create_book_fabricator()
    yield fabricator

    fabricator.clean()
    logging.info("[fixture] Book fabricator 초기화")
