"""Tests for the model configuration and the generation pipeline."""

import numpy as np
import pytest

from arwave import (
    ARModel,
    ARModelConfig,
    autoreg_field,
    autocovariance_nd,
    approx_acf,
    read_parameters,
    load_config,
    variance,
    InvalidParameterError,
    NonStationaryError,
)


def small_config(**kwargs):
    """ACF (3, 3, 3) and an enlarged surface of (20, 6, 6)."""
    params = dict(
        zsize=(16, 5, 5),
        zdelta=(1.0, 1.0, 1.0),
        acf_size=(3, 3, 3),
        size_factor=1.25,
        alpha=0.5,
        beta=0.5,
        gamma=1.0,
    )
    params.update(kwargs)
    return ARModelConfig(**params)


class TestConfig:
    """Tests for the model parameters."""

    def test_defaults_valid(self):
        """Test that the default configuration validates."""
        config = ARModelConfig().validate()
        assert config.zsize2 == (921, 28, 28)
        assert config.fsize == config.acf_size
        assert config.acf_delta == config.zdelta

    def test_enlarged_size(self):
        """Test the enlarged surface size."""
        assert small_config().zsize2 == (20, 6, 6)

    def test_size_factor_below_one(self):
        """Test that size_factor < 1 raises error."""
        with pytest.raises(InvalidParameterError) as excinfo:
            small_config(size_factor=0.9).validate()
        assert excinfo.value.name == "size_factor"
        assert excinfo.value.value == 0.9

    @pytest.mark.parametrize("name", ["zsize", "zdelta", "acf_size"])
    def test_zero_component(self, name):
        """Test that a zero component of a triple raises error."""
        with pytest.raises(InvalidParameterError) as excinfo:
            small_config(**{name: (3, 0, 3)}).validate()
        assert excinfo.value.name == name

    @pytest.mark.parametrize("name", ["zsize", "zdelta", "acf_size"])
    def test_scalar_triple(self, name):
        """Test that a scalar in place of a triple raises error naming it."""
        with pytest.raises(InvalidParameterError) as excinfo:
            small_config(**{name: 5}).validate()
        assert excinfo.value.name == name

    def test_acf_longer_than_surface(self):
        """Test that acf_size[0] > zsize[0] raises error."""
        with pytest.raises(InvalidParameterError) as excinfo:
            small_config(acf_size=(17, 3, 3)).validate()
        assert excinfo.value.name == "acf_size"
        assert "fsize[0] > zsize[0]" in str(excinfo.value)

    def test_read_parameters(self):
        """Test parsing of a parameter file."""
        text = """
        # model parameters
        zsize=(16,5,5)
        zdelta=0.5, 1, 1
        acf_size=3 3 3
        size_factor=1.25
        alpha=0.5
        beta=0.5
        gamma=2
        seed=42
        """
        config = read_parameters(text)
        assert config.zsize == (16, 5, 5)
        assert config.zdelta == (0.5, 1.0, 1.0)
        assert config.acf_size == (3, 3, 3)
        assert config.size_factor == 1.25
        assert config.gamma == 2.0
        assert config.seed == 42

    def test_read_parameters_keeps_defaults(self):
        """Test that absent parameters keep their defaults."""
        config = read_parameters("alpha=0.1\n")
        assert config.alpha == 0.1
        assert config.zsize == ARModelConfig().zsize

    def test_unknown_parameter(self):
        """Test that an unknown parameter raises error."""
        with pytest.raises(InvalidParameterError, match="Unknown parameter: foo."):
            read_parameters("foo=1\n")

    def test_bad_value(self):
        """Test that an unparsable value raises error."""
        with pytest.raises(InvalidParameterError):
            read_parameters("zsize=(1,2)\n")
        with pytest.raises(InvalidParameterError):
            read_parameters("alpha=abc\n")

    def test_load_config(self, tmp_path):
        """Test reading and validating a parameter file."""
        path = tmp_path / "autoreg.model"
        path.write_text("zsize=(16,5,5)\nacf_size=(3,3,3)\nsize_factor=1.25\n")
        config = load_config(path)
        assert config.zsize2 == (20, 6, 6)

    def test_load_config_invalid(self, tmp_path):
        """Test that load_config validates the parameters."""
        path = tmp_path / "autoreg.model"
        path.write_text("size_factor=0.5\n")
        with pytest.raises(InvalidParameterError):
            load_config(path)


class TestARModel:
    """Tests for the generation pipeline."""

    def test_end_to_end(self):
        """Test the full pipeline on ACF (3, 3, 3) and surface (20, 6, 6)."""
        model = ARModel(small_config())
        zeta = model.run(rng=np.random.default_rng(42))
        assert zeta.shape == (16, 5, 5)
        assert np.all(np.isfinite(zeta))
        assert model.ar_coefs[0, 0, 0] == 0
        assert np.all(np.abs(model.ar_coefs) <= 1)
        assert model.white_noise_var >= 0

    def test_slow_decay_not_stationary(self):
        """Test that decay 0.1, oscillation 0.5 cannot be fitted with order (3, 3, 3)."""
        with pytest.raises(NonStationaryError):
            ARModel(small_config(alpha=0.1)).run(rng=np.random.default_rng(0))

    def test_invalid_config_on_construction(self):
        """Test that the model validates its configuration."""
        with pytest.raises(InvalidParameterError):
            ARModel(small_config(zsize=(16, 0, 5)))

    def test_seed_reproducibility(self):
        """Test that the configured seed makes runs reproducible."""
        zeta1 = ARModel(small_config(seed=11)).run()
        zeta2 = ARModel(small_config(seed=11)).run()
        np.testing.assert_array_equal(zeta1, zeta2)

    def test_echo_parameters(self, capsys):
        """Test that verbose runs print the parameters."""
        ARModel(small_config(), verbose=True).run(rng=np.random.default_rng(1))
        out = capsys.readouterr().out
        assert "zsize2:" in out
        assert "(20, 6, 6)" in out
        assert "1.25" in out

    def test_echo_effective_size_factor(self, capsys):
        """Test that the echoed size factor matches the floored enlarged size."""
        ARModel(small_config(zsize=(10, 5, 5), size_factor=1.27)).echo_parameters()
        out = capsys.readouterr().out
        lines = dict(line.split(":", 1) for line in out.splitlines())
        assert lines["zsize2"].strip() == "(12, 6, 6)"
        assert float(lines["size_factor"]) == pytest.approx(1.2)

    def test_negative_white_noise_variance(self, monkeypatch):
        """Test that a negative white noise variance stops the pipeline."""
        monkeypatch.setattr("arwave.model.white_noise_variance", lambda phi, acf: -0.5)
        model = ARModel(small_config())
        with pytest.raises(InvalidParameterError) as excinfo:
            model.run(rng=np.random.default_rng(0))
        assert excinfo.value.name == "variance"
        assert excinfo.value.value == -0.5

    def test_diagnostics_logged(self, caplog):
        """Test that variances are logged during a run."""
        with caplog.at_level("INFO", logger="arwave.model"):
            ARModel(small_config()).run(rng=np.random.default_rng(1))
        assert "WN variance" in caplog.text
        assert "variance(zeta)" in caplog.text

    def test_statistics_match_acf(self):
        """Test that the surface reproduces the model ACF at small lags."""
        config = small_config(zsize=(100, 20, 20), size_factor=1.2)
        zeta = ARModel(config).run(rng=np.random.default_rng(2024))
        assert 0.75 < variance(zeta) < 1.25

        acf = approx_acf(0.5, 0.5, 1.0, (1, 1, 1), (2, 2, 2))
        C = autocovariance_nd(zeta, max_lag=(2, 2, 2))
        np.testing.assert_allclose(C, acf, atol=0.15)


class TestAutoregField:
    """Tests for the one-call generator."""

    def test_shape(self):
        """Test that the surface has the requested shape."""
        zeta = autoreg_field(
            zsize=(16, 5, 5), acf_size=(3, 3, 3), alpha=0.5, beta=0.5, size_factor=1.25
        )
        assert zeta.shape == (16, 5, 5)

    def test_reproducibility(self):
        """Test that RNG produces reproducible results."""
        kwargs = dict(zsize=(12, 4, 4), acf_size=(2, 2, 2), alpha=0.5, beta=0.5)
        zeta1 = autoreg_field(rng=np.random.default_rng(42), **kwargs)
        zeta2 = autoreg_field(rng=np.random.default_rng(42), **kwargs)
        np.testing.assert_array_equal(zeta1, zeta2)

    def test_invalid_size_factor(self):
        """Test that size_factor < 1 raises error."""
        with pytest.raises(InvalidParameterError):
            autoreg_field(zsize=(12, 4, 4), acf_size=(2, 2, 2), size_factor=0.5)
