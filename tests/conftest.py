import pytest

from mandelscape.core.profiles import get_profile


@pytest.fixture
def small_profile():
    """Terrain profile on a 9x9 lattice with a low iteration cap."""
    return get_profile('terrain', lattice_size=9, lattice_spacing=25.0, max_iter=30)


@pytest.fixture
def tiny_profile():
    """3x3 lattice, unit spacing."""
    return get_profile('terrain', lattice_size=3, lattice_spacing=1.0, max_iter=20)
