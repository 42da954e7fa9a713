"""
Unit tests for multi-seed catalog analysis.
"""

import pytest

from mosaic.analysis import analyze_seeds, percentile_stats, weight_shares
from tools import analyze as analyze_command


class TestPercentileStats:
    def test_basic(self):
        stats = percentile_stats([1, 2, 3, 4, 5])
        assert stats["min"] == 1.0
        assert stats["50th"] == 3.0
        assert stats["max"] == 5.0
        assert stats["count"] == 5

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            percentile_stats([])


class TestWeightShares:
    def test_weight_counts_once_per_rotation(self, pipe_catalog):
        shares = weight_shares(pipe_catalog)
        # blank 1, end 4, straight 2, corner 2*4, tee 4, cross 1 -> 20
        assert shares.sum() == pytest.approx(1.0)
        assert shares[pipe_catalog.index_of("corner.png")] == pytest.approx(0.4)
        assert shares[pipe_catalog.index_of("blank.png")] == pytest.approx(0.05)


class TestAnalyzeSeeds:
    def test_never_failing_catalog(self, pipe_catalog):
        report = analyze_seeds(pipe_catalog, 5, 4, range(10))
        assert report["runs"] == 10
        assert report["failures"] == 0
        assert report["failure_rate"] == 0.0
        assert sum(report["usage_share"].values()) == pytest.approx(1.0)
        assert report["distinct_tiles"]["count"] == 10

    def test_always_failing_catalog(self, unsatisfiable_catalog):
        report = analyze_seeds(unsatisfiable_catalog, 1, 1, range(6))
        assert report["failures"] == report["runs"] == 6
        assert report["failure_rate"] == 1.0
        assert report["failure_cells"][(0, 0)] == 6
        assert report["distinct_tiles"] is None
        assert report["usage_share"] == {"tee.png": 0.0}

    def test_dead_end_cells_recorded(self, coin_flip_catalog):
        report = analyze_seeds(coin_flip_catalog, 1, 2, range(40))
        assert 0 < report["failures"] < 40
        assert set(report["failure_cells"]) == {(0, 1)}


class TestAnalyzeCommand:
    @pytest.mark.parametrize("flag", ["--width", "--height", "--runs"])
    def test_non_positive_dimensions_rejected(self, pipe_config, flag):
        with pytest.raises(SystemExit) as exc_info:
            analyze_command.main(["-c", str(pipe_config), flag, "-3"])
        assert exc_info.value.code == 2

    def test_prints_report(self, pipe_config, capsys):
        analyze_command.main(["-c", str(pipe_config), "--runs", "3", "--width", "4", "--height", "3"])
        out = capsys.readouterr().out
        assert "Failures:  0" in out
        assert "corner.png" in out
