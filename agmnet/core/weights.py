"""
Membership weight initialization.

Each member -> community edge needs a weight expressing how strongly the
member belongs to the community. Weights supplied by the caller are kept;
missing ones follow a power law in the community size, so members of large
communities are weakly attached and members of small ones strongly attached.
"""
import math
import numbers

from agmnet.core.errors import ConfigurationError, InvalidWeightError

DEFAULT_COEFFICIENT = 0.6
DEFAULT_SCALE = 1.3


def _is_real(value):
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def validate_weight_params(coefficient, scale):
    """
    Check the power law parameters before anything is touched.

    Raises
    ------
    ConfigurationError
        If either value is not a finite, strictly positive number
    """
    for name, value in (('coefficient', coefficient), ('scale', scale)):
        if not _is_real(value):
            raise ConfigurationError(f"{name} must be a number, got {value!r}")
        if not math.isfinite(value) or value <= 0:
            raise ConfigurationError(f"{name} must be a finite positive number, got {value!r}")


def power_law_weight(members_count, coefficient=DEFAULT_COEFFICIENT, scale=DEFAULT_SCALE):
    """
    Default membership weight: ``members_count ** -coefficient * scale``.

    A community without members would need zero raised to a negative power.
    That case yields 0.0, i.e. the membership contributes nothing.

    Parameters
    ----------
    members_count : int
        Number of edges incident on the community
    coefficient : float, optional
        Power law exponent (default 0.6)
    scale : float, optional
        Multiplicative scale (default 1.3)

    Returns
    -------
    float
    """
    if members_count == 0:
        return 0.0
    return members_count ** -coefficient * scale


def _check_preset_weight(member, community, weight):
    if not _is_real(weight):
        raise InvalidWeightError(
            f"Weight of ({member!r}, {community!r}) must be a number, got {weight!r}")
    if not math.isfinite(weight) or weight < 0:
        raise InvalidWeightError(
            f"Weight of ({member!r}, {community!r}) must be finite and non-negative, got {weight!r}")


def init_weights(A, coefficient=DEFAULT_COEFFICIENT, scale=DEFAULT_SCALE,
                 weight_fn=None, verbose=False):
    """
    Make sure every membership in the affiliation graph carries a weight.

    Existing weights are left untouched, which lets callers inject their own
    (including 0 to switch a membership off). All preset weights are checked
    before the first one is written, so a bad input leaves the graph as it was.

    Parameters
    ----------
    A : AffiliationGraph
        Affiliation graph, mutated in place
    coefficient : float, optional
        Power law exponent (default 0.6)
    scale : float, optional
        Power law scale (default 1.3)
    weight_fn : callable, optional
        ``weight_fn(members_count, coefficient, scale) -> float`` used for
        missing weights. Defaults to power_law_weight.
    verbose : bool, optional
        Whether to print progress information

    Returns
    -------
    dict
        Statistics: total_links, preset, initialized, degenerate

    Raises
    ------
    InvalidWeightError
        If a preset weight is negative, infinite, NaN or not a number
    """
    if weight_fn is None:
        weight_fn = power_law_weight

    stats = {
        'total_links': 0,
        'preset': 0,
        'initialized': 0,
        'degenerate': 0
    }

    pending = []
    for member, community, weight in A.memberships():
        stats['total_links'] += 1
        if weight is None:
            pending.append((member, community))
        else:
            _check_preset_weight(member, community, weight)
            stats['preset'] += 1

    # Community sizes are shared by all of their members
    size_cache = {}
    for member, community in pending:
        if community not in size_cache:
            size_cache[community] = A.community_size(community)
        members_count = size_cache[community]
        if members_count == 0:
            stats['degenerate'] += 1

        weight = float(weight_fn(members_count, coefficient, scale))
        if not math.isfinite(weight) or weight < 0:
            raise InvalidWeightError(
                f"Weight function returned {weight!r} for community {community!r}")
        A.set_weight(member, community, weight)
        stats['initialized'] += 1

    if verbose:
        print(f"  Memberships: {stats['total_links']}")
        print(f"  Preset weights kept: {stats['preset']}")
        print(f"  Weights initialized: {stats['initialized']}")
        if stats['degenerate']:
            print(f"  Empty communities (weight 0): {stats['degenerate']}")

    return stats
