"""Tests for the damage simulation driver and history output."""

import numpy as np
import pandas as pd
import pytest
import xarray as xr

from combined_damage import (
    ConfigurationError,
    DamageSimulation,
    MaterialNotFoundError,
    SimulationConfig,
)
from combined_damage.io import history_to_dataset, save_damage_history


class TestEvaluationOrder:
    """Tests for ordering sources before combined models."""

    def test_configuration_order_kept(self, simulation_dict):
        simulation = DamageSimulation(simulation_dict)
        assert simulation.evaluation_order() == [
            "tension", "creep", "combined", "brittle_limit", "envelope"
        ]

    def test_sources_moved_before_combiners(self, simulation_dict):
        materials = simulation_dict["materials"]
        simulation_dict["materials"] = {
            name: materials[name]
            for name in ["envelope", "combined", "tension", "creep", "brittle_limit"]
        }

        simulation = DamageSimulation(simulation_dict)
        assert simulation.evaluation_order() == [
            "tension", "creep", "combined", "brittle_limit", "envelope"
        ]

    def test_cycle_detected(self, simulation_dict):
        simulation_dict["materials"]["combined"]["damage_models"] = ["tension", "envelope"]

        with pytest.raises(ConfigurationError) as excinfo:
            DamageSimulation(simulation_dict)
        assert "Circular" in str(excinfo.value)

    def test_self_reference_detected(self, simulation_dict):
        simulation_dict["materials"]["combined"]["damage_models"] = ["combined"]

        with pytest.raises(ConfigurationError):
            DamageSimulation(simulation_dict)

    def test_missing_source(self, simulation_dict):
        simulation_dict["materials"]["combined"]["damage_models"] = ["tension", "fatigue"]

        with pytest.raises(MaterialNotFoundError):
            DamageSimulation(simulation_dict)


class TestDamageSimulation:
    """Tests for stepping materials."""

    def test_accepts_config_object(self, simulation_dict):
        config = SimulationConfig.from_dict(simulation_dict)
        simulation = DamageSimulation(config, verbose=False)
        assert simulation.config is config

    def test_run_history(self, simulation_dict):
        with DamageSimulation(simulation_dict) as simulation:
            history = simulation.run()

        assert simulation.n_completed_steps == 6
        assert history["combined"].dims == ("step", "qp")
        assert history["combined"].shape == (6, 4)

        np.testing.assert_allclose(
            history["combined"].sel(qp=0).values,
            [0.0, 0.145, 0.37, 0.37, 0.55, 0.64],
        )
        np.testing.assert_allclose(
            history["envelope"].sel(qp=0).values,
            [0.4, 0.4, 0.4, 0.4, 0.55, 0.64],
        )

    def test_history_non_decreasing(self, simulation_dict):
        history = DamageSimulation(simulation_dict).run()

        for name in ["combined", "envelope"]:
            steps = history[name].values
            assert np.all(np.diff(steps, axis=0) >= 0.0)
            assert np.all(steps <= 1.0)

    def test_max_damage_respected(self, simulation_dict):
        simulation_dict["materials"]["combined"]["max_damage"] = 0.3
        history = DamageSimulation(simulation_dict).run()

        assert float(history["combined"].max()) == pytest.approx(0.3)

    def test_step_returns_values(self, simulation_dict):
        simulation = DamageSimulation(simulation_dict)
        values = simulation.step()

        np.testing.assert_allclose(values["brittle_limit"], [0.4] * 4)
        assert simulation.get_results()["envelope"] is not None
        assert simulation.get_material("combined").get_qp_damage_index_old(0) == 0.0

    def test_run_and_save_csv(self, simulation_dict, tmp_path):
        simulation_dict["processing"]["output_format"] = "csv"
        simulation_dict["processing"]["output_path"] = str(tmp_path / "out" / "history.nc")

        DamageSimulation(simulation_dict).run(n_steps=2)

        frame = pd.read_csv(tmp_path / "out" / "history.csv")
        assert len(frame) == 2 * 4
        assert {"step", "qp", "combined", "envelope"} <= set(frame.columns)

    def test_save_without_path(self, simulation_dict):
        with pytest.raises(ValueError):
            DamageSimulation(simulation_dict).run(n_steps=1, save=True)

    def test_repeated_source_counted_twice(self, simulation_dict):
        simulation_dict["materials"]["combined"]["damage_models"] = ["tension", "tension"]

        with pytest.warns(UserWarning, match="more than once"):
            simulation = DamageSimulation(simulation_dict)
        history = simulation.run(n_steps=3)

        assert len(simulation.get_material("combined").damage_models) == 2
        # 1 - (1 - d)^2 for tension damage d
        np.testing.assert_allclose(
            history["combined"].sel(qp=0).values, [0.0, 0.19, 0.51]
        )


class TestHistoryOutput:
    """Tests for converting and writing histories."""

    def test_history_to_dataset(self):
        ds = history_to_dataset(
            {"a": [np.array([0.1, 0.2]), np.array([0.3, 0.4])]}, n_points=2
        )

        assert list(ds["step"].values) == [0, 1]
        assert ds["a"].attrs["units"] == "1"
        np.testing.assert_allclose(ds["a"].sel(step=1).values, [0.3, 0.4])

    def test_empty_history(self):
        ds = history_to_dataset({"a": []}, n_points=3)
        assert ds["a"].shape == (0, 3)

    def test_unknown_format(self, tmp_path):
        ds = history_to_dataset({"a": [np.zeros(2)]}, n_points=2)
        with pytest.raises(ValueError):
            save_damage_history(ds, str(tmp_path / "history"), output_format="hdf5")

    def test_unknown_format_creates_nothing(self, tmp_path):
        ds = history_to_dataset({"a": [np.zeros(2)]}, n_points=2)
        with pytest.raises(ValueError):
            save_damage_history(ds, str(tmp_path / "new" / "history"), output_format="hdf5")
        assert not (tmp_path / "new").exists()

    def test_save_netcdf_round_trip(self, tmp_path):
        ds = history_to_dataset(
            {"combined": [np.array([0.1, 0.2]), np.array([0.3, 0.4])]}, n_points=2
        )
        path = save_damage_history(ds, str(tmp_path / "history"), output_format="netcdf")

        assert path.suffix == ".nc"
        with xr.open_dataset(path) as loaded:
            np.testing.assert_allclose(loaded["combined"].values, ds["combined"].values)
            assert loaded["combined"].attrs["units"] == "1"

    def test_save_zarr_round_trip(self, tmp_path):
        pytest.importorskip("zarr")
        ds = history_to_dataset(
            {"combined": [np.array([0.1, 0.2]), np.array([0.3, 0.4])]}, n_points=2
        )
        path = save_damage_history(ds, str(tmp_path / "history"), output_format="zarr")

        assert path.suffix == ".zarr"
        loaded = xr.open_zarr(path)
        np.testing.assert_allclose(loaded["combined"].values, ds["combined"].values)
