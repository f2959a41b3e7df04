import numpy as np
import pandas as pd
import pytest

from pdist.calculators.poisson import PoissonCalculator
from pdist.calibration.poisson_fit import fit_poisson_rate
from pdist.errors import DomainError, InvalidArgument


def test_fit_recovers_rate_approximately():
    rng = np.random.default_rng(0)
    lam_true = 3.5
    T = np.full(200, 10.0)  # seconds per window
    N = rng.poisson(lam_true * T)

    df = pd.DataFrame({"count": N, "exposure": T})
    res = fit_poisson_rate(df, exposure_col="exposure")

    assert abs(res.lam - lam_true) / lam_true < 0.05
    assert res.lam_low < lam_true < res.lam_high
    assert res.n_points == 200
    assert res.total_exposure == pytest.approx(2000.0)


def test_fit_unit_windows_and_garwood_interval():
    df = pd.DataFrame({"count": [2, 3, 4]})
    res = fit_poisson_rate(df)
    assert res.lam == pytest.approx(3.0)
    assert res.lam_low == pytest.approx(1.3718, abs=1e-3)
    assert res.lam_high == pytest.approx(5.6949, abs=1e-3)
    assert res.method == "mle_garwood"


def test_fit_all_zero_counts():
    df = pd.DataFrame({"count": [0, 0], "exposure": [1.0, 1.0]})
    res = fit_poisson_rate(df, exposure_col="exposure")
    assert res.lam == 0.0
    assert res.lam_low == 0.0
    # -ln(0.025) / T
    assert res.lam_high == pytest.approx(-np.log(0.025) / 2.0, rel=1e-6)


def test_fit_drops_missing_counts_and_nonpositive_exposure():
    df = pd.DataFrame({
        "count": [1.0, np.nan, 5.0, 2.0],
        "exposure": [1.0, 1.0, 0.0, 1.0],
    })
    res = fit_poisson_rate(df, exposure_col="exposure")
    assert res.n_points == 2
    assert res.lam == pytest.approx(1.5)


def test_fit_rejects_bad_input():
    with pytest.raises(InvalidArgument):
        fit_poisson_rate(pd.DataFrame({"n": [1, 2]}))
    with pytest.raises(InvalidArgument):
        fit_poisson_rate(pd.DataFrame({"count": [1, 2]}), exposure_col="exposure")
    with pytest.raises(InvalidArgument):
        fit_poisson_rate(pd.DataFrame({"count": [np.nan]}))
    with pytest.raises(InvalidArgument):
        fit_poisson_rate(pd.DataFrame({"count": [1, 2]}), confidence=1.0)
    with pytest.raises(DomainError):
        fit_poisson_rate(pd.DataFrame({"count": [1, -2]}))


def test_fit_result_builds_distribution():
    res = fit_poisson_rate(pd.DataFrame({"count": [4, 4, 4]}))
    d = res.to_distribution(PoissonCalculator(seed=0))
    assert d.lam == pytest.approx(4.0)
    assert d.stats("m") == {"mean": pytest.approx(4.0)}
