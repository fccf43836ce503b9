"""
Data writing functions for damage simulations.

All file writing operations are isolated here.
"""

import xarray as xr
import numpy as np
from typing import Dict, List, Any, Optional
from pathlib import Path

OUTPUT_FORMATS = {"netcdf": ".nc", "zarr": ".zarr", "csv": ".csv"}


def history_to_dataset(
    history: Dict[str, List[np.ndarray]],
    n_points: int,
    attrs: Optional[Dict[str, Any]] = None,
) -> xr.Dataset:
    """
    Convert recorded damage values into a labelled dataset.

    Parameters
    ----------
    history : dict
        Material name -> list of per-step damage arrays of length ``n_points``
    n_points : int
        Number of evaluation points
    attrs : dict, optional
        Global attributes attached to the dataset

    Returns
    -------
    xr.Dataset
        One variable per material with dims ``(step, qp)``

    Examples
    --------
    >>> ds = history_to_dataset({"combined": [np.array([0.1, 0.2])]}, n_points=2)
    >>> ds["combined"].dims
    ('step', 'qp')
    """
    n_steps = max((len(values) for values in history.values()), default=0)

    data_vars = {}
    for name, values in history.items():
        if values:
            data = np.stack([np.asarray(v, dtype=float) for v in values])
        else:
            data = np.empty((0, n_points), dtype=float)

        data_vars[name] = xr.DataArray(
            data,
            dims=["step", "qp"],
            attrs={"long_name": f"{name} damage index", "units": "1"},
        )

    return xr.Dataset(
        data_vars,
        coords={"step": np.arange(n_steps), "qp": np.arange(n_points)},
        attrs=dict(attrs or {}),
    )


def save_damage_history(
    data: xr.Dataset,
    output_path: str,
    output_format: str = "netcdf",
) -> Path:
    """
    Save a damage history dataset.

    Parameters
    ----------
    data : xr.Dataset
        Dataset built by ``history_to_dataset``
    output_path : str
        Output file path. The suffix is replaced to match ``output_format``.
    output_format : str, optional
        "netcdf", "zarr" or "csv" (default: "netcdf")

    Returns
    -------
    Path
        Path actually written

    Raises
    ------
    ValueError
        If the output format is unknown
    """
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(
            f"Unknown output format: {output_format}. "
            f"Valid options: {list(OUTPUT_FORMATS)}"
        )

    path = Path(output_path).with_suffix(OUTPUT_FORMATS[output_format])
    path.parent.mkdir(parents=True, exist_ok=True)

    if output_format == "netcdf":
        data.to_netcdf(path)

    elif output_format == "zarr":
        data.to_zarr(path, mode='w')

    else:
        data.to_dataframe().reset_index().to_csv(path, index=False)

    return path
