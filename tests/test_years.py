import logging

import numpy as np
import pandas as pd

from fars.data.years import YearResult, read_years, summarize_years

from conftest import ROWS_2013, ROWS_2014, accidents, write_accidents


def test_read_years_partial_failure(data_dir, caplog):
    with caplog.at_level(logging.WARNING, logger="fars"):
        results = read_years([2013, 1999], data_dir=data_dir)

    assert len(results) == 2
    ok, bad = results
    assert ok.ok and ok.year == 2013
    assert list(ok.data.columns) == ["MONTH", "year"]
    assert len(ok.data) == ROWS_2013

    assert not bad.ok
    assert bad.data is None
    assert "accident_1999.csv.bz2" in bad.error
    assert "invalid year: 1999" in caplog.text


def test_read_years_keeps_input_order(data_dir):
    results = read_years([2014, 1999, 2013], data_dir=data_dir)
    assert [r.year for r in results] == [2014, 1999, 2013]
    assert [r.ok for r in results] == [True, False, True]


def test_read_years_accepts_scalar(data_dir):
    results = read_years(2014, data_dir=data_dir)
    assert len(results) == 1
    assert results[0].data["year"].unique().tolist() == [2014]


def test_read_years_uses_requested_year_not_file_year(tmp_path):
    write_accidents(tmp_path, 2010, accidents(1900, [1, 2, 3]))
    (result,) = read_years([2010], data_dir=tmp_path)
    assert result.data["year"].tolist() == [2010, 2010, 2010]


def test_read_years_schema_failure_is_a_warning(tmp_path, caplog):
    path = tmp_path / "accident_2011.csv.bz2"
    pd.DataFrame({"MONTH": [1]}).to_csv(path, index=False, compression="bz2")
    with caplog.at_level(logging.WARNING, logger="fars"):
        (result,) = read_years(["2011"], data_dir=tmp_path)
    assert not result.ok
    assert "LONGITUD" in result.error
    assert "invalid year: 2011" in caplog.text


def test_year_result_ok_flag():
    assert YearResult(year=2013, data=pd.DataFrame()).ok
    assert not YearResult(year=2013, error="boom").ok


def test_summarize_single_year(data_dir):
    summary = summarize_years(2013, data_dir=data_dir)
    assert list(summary.columns) == [2013]
    assert len(summary) <= 12
    assert summary.index.tolist() == list(range(1, 13))
    assert int(summary[2013].sum()) == ROWS_2013


def test_summarize_multiple_years_aligns_months(data_dir):
    summary = summarize_years([2013, 2014], data_dir=data_dir)
    assert list(summary.columns) == [2013, 2014]
    assert len(summary) == 12
    # Nebraska has m accidents in month m, Alabama adds one in Jan-Mar,
    # Alaska adds two in June
    assert summary.loc[1, 2013] == 2
    assert summary.loc[6, 2013] == 8
    assert summary.loc[12, 2013] == 12
    assert summary.loc[1, 2014] == 10
    assert int(summary[2014].sum()) == ROWS_2014
    # July-December 2014 have no data: missing, not zero
    assert summary.loc[7:12, 2014].isna().all()


def test_summarize_skips_failed_years(data_dir, caplog):
    with caplog.at_level(logging.WARNING, logger="fars"):
        summary = summarize_years([2013, 2020], data_dir=data_dir)
    assert list(summary.columns) == [2013]
    assert "invalid year: 2020" in caplog.text


def test_summarize_all_years_failing_returns_empty(tmp_path):
    summary = summarize_years([2001, 2002], data_dir=tmp_path)
    assert summary.empty
    assert len(summary.columns) == 0


def test_read_years_accepts_numpy_integer(data_dir):
    (result,) = read_years(np.int64(2013), data_dir=data_dir)
    assert result.ok
    assert result.year == 2013
    assert len(result.data) == ROWS_2013


def test_read_years_accepts_year_pulled_from_frame(data_dir):
    years = pd.Series([2013, 2014])
    results = read_years(years.iloc[0], data_dir=data_dir)
    assert [r.year for r in results] == [2013]


def test_summarize_accepts_float_year(data_dir):
    summary = summarize_years(2013.0, data_dir=data_dir)
    assert list(summary.columns) == [2013]
    assert int(summary[2013].sum()) == ROWS_2013


def test_read_years_normalises_year_on_failure(data_dir):
    results = read_years(["2013", "1999", "abc"], data_dir=data_dir)
    assert [r.year for r in results] == [2013, 1999, "abc"]
    assert [r.ok for r in results] == [True, False, False]


def test_generator_summary_accepts_numpy_integer(data_dir, tmp_path):
    from fars.reports.generators import ReportGenerator

    gen = ReportGenerator(data_dir=data_dir, output_dir=tmp_path / "out")
    summary = gen.generate_summary(np.int64(2014))
    assert list(summary.columns) == [2014]
