from dataclasses import dataclass, fields


@dataclass(frozen=True)
class LoadSet:
    r"""Internal forces acting on the cross-section.

    All values are SI. A positive :py:attr:`bending_moment` produces
    positive bending stress at positive ordinates.

    Parameters
    ----------
    axial_force : :any:`float`, default=0.0
        Normal force :math:`N` in N.
    bending_moment : :any:`float`, default=0.0
        Bending moment :math:`M` in N*m.
    torque : :any:`float`, default=0.0
        Torsional moment :math:`T` in N*m.
    shear_force : :any:`float`, default=0.0
        Transverse shear force :math:`V` in N.

    Examples
    --------
    Superposition of two load cases is a plain component-wise sum:

    >>> LoadSet(1000, 50) + LoadSet(bending_moment=25, shear_force=500)
    LoadSet(axial_force=1000.0, bending_moment=75, torque=0.0, shear_force=500.0)
    """

    axial_force: float = 0.0
    bending_moment: float = 0.0
    torque: float = 0.0
    shear_force: float = 0.0

    def __add__(self, other):
        if not isinstance(other, LoadSet):
            return NotImplemented
        return LoadSet(*(
            getattr(self, f.name) + getattr(other, f.name)
            for f in fields(self)
        ))
