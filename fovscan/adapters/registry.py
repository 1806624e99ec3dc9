"""
Object registry adapters for fovscan.

This module provides an in-memory ObjectRegistry and a loader that
reads plot telemetry rows from CSV or Excel files.
"""

import os
import csv
from typing import Dict, Iterable, List, Optional
import openpyxl
from fovscan.core.models import GeoPoint, SoilReading, TrackedObject
from fovscan.core.geodesy import validate_coordinates
from fovscan.observability import metrics
from fovscan.observability.logging_setup import get_logger

log = get_logger("fovscan.registry")

# 파일 컬럼 -> SoilReading 필드
REQUIRED_COLUMNS = ("id",)
NUMERIC_COLUMNS = ("ph", "moisture", "n", "p", "k", "temperature", "lat", "lng")


def _to_float(value) -> Optional[float]:
    if value is None or value == "":
        return None
    return float(value)


def _row_to_reading(row: Dict[str, object]) -> SoilReading:
    data = {"id": str(row["id"]).strip()}
    for col in NUMERIC_COLUMNS:
        if col in row:
            data[col] = _to_float(row[col])
    if row.get("timestamp"):
        data["timestamp"] = str(row["timestamp"])

    if data.get("lat") is not None and data.get("lng") is not None:
        if not validate_coordinates(data["lat"], data["lng"]):
            raise ValueError(f"좌표 범위 벗어남: lat={data['lat']}, lng={data['lng']}")
    return SoilReading(**data)


def _iter_csv(path: str) -> Iterable[Dict[str, object]]:
    with open(path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        headers = reader.fieldnames or []
        for col in REQUIRED_COLUMNS:
            if col not in headers:
                raise ValueError(f"필수 컬럼을 찾을 수 없습니다: {col}. 사용 가능한 컬럼: {headers}")
        yield from reader


def _iter_xlsx(path: str) -> Iterable[Dict[str, object]]:
    wb = openpyxl.load_workbook(path, data_only=True)
    ws = wb.active
    headers = [c.value for c in ws[1]]

    log.info(f"엑셀 헤더 확인: {headers}")

    for col in REQUIRED_COLUMNS:
        if col not in headers:
            raise ValueError(f"필수 컬럼을 찾을 수 없습니다: {col}. 사용 가능한 컬럼: {headers}")

    for row in ws.iter_rows(min_row=2, values_only=True):
        yield dict(zip(headers, row))


def load_readings(path: str, *, metrics_enabled: bool = True) -> List[SoilReading]:
    """
    플롯 텔레메트리 파일을 로드합니다.

    잘못된 행은 경고 로그를 남기고 건너뜁니다.

    Args:
        path: .csv 또는 .xlsx 파일 경로
        metrics_enabled: 건너뛴 행 카운터 기록 여부

    Returns:
        측정값 목록
    """
    ext = os.path.splitext(path)[1].lower()
    if ext == ".csv":
        rows = _iter_csv(path)
    elif ext in (".xlsx", ".xlsm"):
        rows = _iter_xlsx(path)
    else:
        raise ValueError(f"지원하지 않는 파일 형식: {ext}")

    readings: List[SoilReading] = []
    for row_num, row in enumerate(rows, start=2):
        # 빈 행 건너뛰기
        if not row.get("id"):
            continue
        try:
            readings.append(_row_to_reading(row))
        except (ValueError, TypeError) as e:
            if metrics_enabled:
                metrics.registry_rows_skipped.inc()
            log.warning(f"행 {row_num} 데이터 변환 오류 건너뜀: {row} error:{e}")
            continue

    log.info(f"플롯 데이터 로드됨 path:{path} count:{len(readings)}")
    return readings


class InMemoryRegistry:
    """메모리 기반 객체 레지스트리"""

    def __init__(self, readings: Iterable[SoilReading] = ()):
        self._readings: Dict[str, SoilReading] = {}
        for r in readings:
            self.upsert(r)

    @classmethod
    def from_file(cls, path: str, *, metrics_enabled: bool = True) -> "InMemoryRegistry":
        return cls(load_readings(path, metrics_enabled=metrics_enabled))

    def upsert(self, reading: SoilReading) -> None:
        """같은 ID의 측정값을 최신 값으로 교체합니다."""
        self._readings[reading.id] = reading

    def readings(self) -> Dict[str, SoilReading]:
        return dict(self._readings)

    def objects(self) -> List[TrackedObject]:
        """좌표가 있는 측정값만 추적 객체로 반환합니다."""
        out: List[TrackedObject] = []
        for r in self._readings.values():
            pos: Optional[GeoPoint] = r.position
            if pos is None:
                continue
            out.append(TrackedObject(id=r.id, position=pos, label=r.id))
        return out
