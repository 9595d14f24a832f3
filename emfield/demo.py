from dataclasses import dataclass

from emfield.fields import ElectricField, MagneticField
from emfield.vector import format_number


# ----------------------------
# Config
# ----------------------------
@dataclass
class DemoCfg:
    e1: tuple[float, float, float] = (1.0, 2.0, 3.0)
    e2: tuple[float, float, float] = (4.0, 5.0, 6.0)
    b1: tuple[float, float, float] = (7.0, 8.0, 9.0)
    b2: tuple[float, float, float] = (10.0, 11.0, 12.0)

    charge_c: float = 1e-9
    current_a: float = 1.0
    distance_m: float = 0.1

    # raise DomainError for distance_m <= 0 instead of printing inf/nan
    strict: bool = False


def run(cfg: DemoCfg) -> list[str]:
    lines = []

    e1 = ElectricField(*cfg.e1)
    e2 = ElectricField(*cfg.e2)
    lines.append("Electric Field e1: " + e1.vector.format_components())
    lines.append("Electric Field e2: " + e2.vector.format_components())

    e1.calculate_electric_field(cfg.charge_c, cfg.distance_m, strict=cfg.strict)
    lines.append(f"Calculated Electric Field: {format_number(e1.get_calculated_e())} N/C")

    e3 = e1 + e2
    lines.append(f"e3 = e1 + e2: {e3}")

    b1 = MagneticField(*cfg.b1)
    b2 = MagneticField(*cfg.b2)
    lines.append("Magnetic Field b1: " + b1.vector.format_components())
    lines.append("Magnetic Field b2: " + b2.vector.format_components())

    b1.calculate_magnetic_field(cfg.current_a, cfg.distance_m, strict=cfg.strict)
    lines.append(f"Calculated Magnetic Field: {format_number(b1.get_calculated_b())} T")

    b3 = b1 + b2
    lines.append(f"b3 = b1 + b2: {b3}")

    return lines


def main(cfg: DemoCfg | None = None) -> int:
    for line in run(cfg or DemoCfg()):
        print(line)
    return 0


if __name__ == "__main__":
    main()
