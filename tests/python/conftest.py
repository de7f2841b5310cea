"""
Pytest configuration and shared fixtures for mtxread tests.
"""

import pytest
import numpy as np
from pathlib import Path
import sys

# Add src to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root / "src"))

import mtxread


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def restore_precision():
    """Undo set_precision() calls made by a test."""
    coord, value = mtxread.get_precision()
    yield
    mtxread.set_precision(coord=coord, value=value)


@pytest.fixture
def mtx_text():
    """Build the text of a coordinate file.

    Usage: mtx_text("real", "general", (3, 3, 2), ["1 1 4.0", "2 3 5.0"])
    """
    def _build(value_format, symmetry, size, lines, comments=()):
        out = [f"%%MatrixMarket matrix coordinate {value_format} {symmetry}"]
        out.extend(comments)
        out.append(" ".join(str(s) for s in size))
        out.extend(lines)
        return "\n".join(out) + "\n"
    return _build


@pytest.fixture
def write_mtx(tmp_path):
    """Write text to a .mtx file under tmp_path and return its path."""
    counter = {"n": 0}

    def _write(text, name=None):
        counter["n"] += 1
        path = tmp_path / (name or f"matrix_{counter['n']}.mtx")
        path.write_text(text)
        return path
    return _write


@pytest.fixture
def general_real_path(write_mtx, mtx_text):
    """Scenario A: 3x3 general real matrix with an empty middle row.

    Matrix:
    [[4, 0, 0],
     [0, 0, 5],
     [0, 0, 0]]
    """
    return write_mtx(mtx_text("real", "general", (3, 3, 2), ["1 1 4.0", "2 3 5.0"]))


@pytest.fixture
def symmetric_real_path(write_mtx, mtx_text):
    """Scenario B: a single off-diagonal entry of a symmetric matrix."""
    return write_mtx(mtx_text("real", "symmetric", (3, 3, 1), ["1 2 2.0"]))


@pytest.fixture
def pattern_path(write_mtx, mtx_text):
    """Scenario C: a pattern matrix with one entry."""
    return write_mtx(mtx_text("pattern", "general", (2, 2, 1), ["1 2"]))


@pytest.fixture
def unsorted_path(write_mtx, mtx_text):
    """General 3x3 matrix whose entries are not in row or column order.

    Matrix:
    [[3, 0, 2],
     [0, 4, 0],
     [1, 0, 0]]
    """
    return write_mtx(mtx_text(
        "real", "general", (3, 3, 4),
        ["3 1 1.0", "1 3 2.0", "1 1 3.0", "2 2 4.0"],
        comments=["% unsorted entries", "%"],
    ))


@pytest.fixture
def random_entries():
    """Random 1-based (rows, cols, values) of a 20x30 matrix, with duplicates."""
    rng = np.random.default_rng(42)
    nnz = 120
    rows = rng.integers(1, 21, size=nnz)
    cols = rng.integers(1, 31, size=nnz)
    values = np.round(rng.standard_normal(nnz), 6)
    return rows, cols, values


# =============================================================================
# Helper Functions
# =============================================================================

def assert_compressed_invariants(mat):
    """Offsets/indices invariants that hold for every matrix read from a file."""
    offsets = np.asarray(mat.indptr, dtype=np.int64)
    assert len(offsets) == mat.primary_size + 1
    assert offsets[0] == 0
    assert offsets[-1] == mat.num_nonzeros
    assert np.all(np.diff(offsets) >= 0)
    assert len(mat.indices) == mat.num_nonzeros
    assert len(mat.values) == mat.num_nonzeros
    for i in range(mat.primary_size):
        seg = np.asarray(mat.indices[offsets[i]:offsets[i + 1]], dtype=np.int64)
        assert np.all(np.diff(seg) >= 0)


@pytest.fixture
def check_invariants():
    """Fixture form of assert_compressed_invariants."""
    return assert_compressed_invariants
