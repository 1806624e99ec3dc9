"""
Registry 어댑터 단위 테스트

이 모듈은 CSV/Excel 로더와 메모리 레지스트리를 테스트합니다.
"""

import pytest
import openpyxl
from prometheus_client import REGISTRY
from fovscan.core.models import SoilReading
from fovscan.adapters.registry import InMemoryRegistry, load_readings


class TestLoadReadings:
    """플롯 데이터 로드 테스트"""

    def test_load_csv(self, tmp_path):
        """CSV 파일에서 측정값 로드"""
        path = tmp_path / "plots.csv"
        path.write_text(
            "id,lat,lng,ph,moisture,n,p,k,temperature\n"
            "PLT-001,1.8243,102.3442,6.5,70,25,15,23,28.0\n"
            "PLT-002,1.8255,102.3460,5.2,65,130,25,120,29.1\n",
            encoding="utf-8",
        )

        readings = load_readings(str(path))

        assert [r.id for r in readings] == ["PLT-001", "PLT-002"]
        assert readings[0].ph == 6.5
        assert readings[0].lat == 1.8243
        assert readings[1].temperature == 29.1

    def test_load_csv_optional_columns(self, tmp_path):
        """선택 컬럼이 없거나 비어 있으면 None"""
        path = tmp_path / "plots.csv"
        path.write_text("id,ph\nPLT-001,\nPLT-002,7.0\n", encoding="utf-8")

        readings = load_readings(str(path))

        assert readings[0].ph is None
        assert readings[0].position is None
        assert readings[1].ph == 7.0

    def test_load_csv_skips_bad_rows(self, tmp_path):
        """변환 불가/범위 밖 행은 건너뜀"""
        path = tmp_path / "plots.csv"
        path.write_text(
            "id,lat,lng,ph\n"
            "PLT-001,1.0,102.0,6.5\n"
            "PLT-002,abc,102.0,6.5\n"
            "PLT-003,95.0,102.0,6.5\n"
            ",1.0,102.0,6.5\n"
            "PLT-004,1.0,102.0,not-a-number\n"
            "PLT-005,1.1,102.1,7.0\n",
            encoding="utf-8",
        )

        readings = load_readings(str(path))

        assert [r.id for r in readings] == ["PLT-001", "PLT-005"]

    @pytest.mark.parametrize("enabled,expected", [(True, 2), (False, 0)])
    def test_skipped_rows_counter(self, tmp_path, enabled, expected):
        """건너뛴 행 카운터는 메트릭 활성화 시에만 증가"""
        path = tmp_path / "plots.csv"
        path.write_text("id,lat,lng\nPLT-001,abc,102.0\nPLT-002,95.0,102.0\n", encoding="utf-8")
        before = REGISTRY.get_sample_value("fovscan_registry_rows_skipped_total") or 0.0

        assert load_readings(str(path), metrics_enabled=enabled) == []

        after = REGISTRY.get_sample_value("fovscan_registry_rows_skipped_total") or 0.0
        assert after - before == expected

    def test_load_csv_missing_id_column(self, tmp_path):
        path = tmp_path / "plots.csv"
        path.write_text("name,lat,lng\nA,1,2\n", encoding="utf-8")

        with pytest.raises(ValueError, match="id"):
            load_readings(str(path))

    def test_load_xlsx(self, tmp_path):
        """Excel 파일에서 측정값 로드"""
        path = tmp_path / "plots.xlsx"
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.append(["id", "lat", "lng", "ph", "moisture"])
        ws.append(["PLT-001", 1.8243, 102.3442, 6.5, 70])
        ws.append([None, None, None, None, None])
        ws.append(["PLT-002", 1.8255, 102.3460, 8.1, 30])
        wb.save(path)

        readings = load_readings(str(path))

        assert [r.id for r in readings] == ["PLT-001", "PLT-002"]
        assert readings[1].moisture == 30

    def test_load_xlsx_missing_columns(self, tmp_path):
        path = tmp_path / "plots.xlsx"
        wb = openpyxl.Workbook()
        wb.active.append(["Name", "Lat", "Lon"])
        wb.save(path)

        with pytest.raises(ValueError):
            load_readings(str(path))

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "plots.json"
        path.write_text("[]", encoding="utf-8")

        with pytest.raises(ValueError, match="지원하지 않는"):
            load_readings(str(path))


class TestInMemoryRegistry:
    """메모리 레지스트리 테스트"""

    def test_objects_skip_readings_without_position(self):
        registry = InMemoryRegistry([
            SoilReading(id="a", lat=1.0, lng=2.0),
            SoilReading(id="b", ph=6.0),
        ])
        objs = registry.objects()
        assert [o.id for o in objs] == ["a"]
        assert objs[0].position.lat == 1.0
        assert objs[0].display_name == "a"

    def test_upsert_replaces(self):
        registry = InMemoryRegistry([SoilReading(id="a", ph=6.0)])
        registry.upsert(SoilReading(id="a", ph=4.0))
        assert registry.readings()["a"].ph == 4.0
        assert len(registry.readings()) == 1

    def test_readings_is_copy(self):
        registry = InMemoryRegistry([SoilReading(id="a")])
        registry.readings().clear()
        assert "a" in registry.readings()

    def test_from_file(self, tmp_path):
        path = tmp_path / "plots.csv"
        path.write_text("id,lat,lng\nPLT-001,1.0,2.0\n", encoding="utf-8")
        registry = InMemoryRegistry.from_file(str(path))
        assert [o.id for o in registry.objects()] == ["PLT-001"]
