"""Dependency Injection for FastAPI.

모델 엔진은 프로세스 전역 싱글톤입니다. 테스트에서는
app.dependency_overrides[get_engine]로 교체합니다.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from waste.application.classify import (
    ClassificationEngine,
    ClassifyImageCommand,
    ImagePreprocessor,
)
from waste.application.nearby import CenterReader, GetNearbyCentersQuery
from waste.infrastructure.imaging import PillowImagePreprocessor
from waste.infrastructure.inference import KerasClassificationEngine
from waste.infrastructure.persistence_static import StaticCenterReader
from waste.setup.config import Settings, get_settings


@lru_cache
def get_engine() -> ClassificationEngine:
    """분류 엔진 싱글톤을 반환합니다."""
    return KerasClassificationEngine(get_settings().model_path)


@lru_cache
def get_image_preprocessor() -> ImagePreprocessor:
    """이미지 전처리기 싱글톤을 반환합니다."""
    return PillowImagePreprocessor(get_settings().image_size)


@lru_cache
def get_center_reader() -> CenterReader:
    """센터 레지스트리 Reader 싱글톤을 반환합니다."""
    return StaticCenterReader()


def get_classify_command(
    preprocessor: Annotated[ImagePreprocessor, Depends(get_image_preprocessor)],
    engine: Annotated[ClassificationEngine, Depends(get_engine)],
) -> ClassifyImageCommand:
    """ClassifyImageCommand를 주입합니다."""
    return ClassifyImageCommand(preprocessor=preprocessor, engine=engine)


def get_nearby_centers_query(
    reader: Annotated[CenterReader, Depends(get_center_reader)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> GetNearbyCentersQuery:
    """GetNearbyCentersQuery를 주입합니다."""
    return GetNearbyCentersQuery(reader, radius_km=settings.search_radius_km)


SettingsDep = Annotated[Settings, Depends(get_settings)]
EngineDep = Annotated[ClassificationEngine, Depends(get_engine)]
CenterReaderDep = Annotated[CenterReader, Depends(get_center_reader)]
ClassifyCommandDep = Annotated[ClassifyImageCommand, Depends(get_classify_command)]
NearbyCentersQueryDep = Annotated[GetNearbyCentersQuery, Depends(get_nearby_centers_query)]
