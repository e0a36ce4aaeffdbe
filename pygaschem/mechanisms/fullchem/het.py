"""Heterogeneous reactions of the GEOS-Chem full chemistry mechanism.

These reactions are disabled unless requested, see
:attr:`MechanismParams.include_heterogeneous`.
"""

from __future__ import annotations

from pygaschem.core.reaction import Reaction
from pygaschem.ratelaws import het
from pygaschem.ratelaws.base import RateLaw
from pygaschem.ratelaws.het import sr_mw


#: Iodine species taken up by aerosol: uptake coefficient and product coefficient
IODINE_UPTAKE = (
    ("HI", 0.10, ""),
    ("I2O2", 0.02, "2.000"),
    ("I2O3", 0.02, "2.000"),
    ("I2O4", 0.02, "2.000"),
)

#: Iodine species released as IBr / ICl on acidic sea salt: uptake coefficient and coproduct
IODINE_BREAKDOWN = (
    ("IONO", 0.02, " + HNO2"),
    ("IONO2", 0.01, " + HNO3"),
    ("HOI", 0.01, ""),
)


def _iodine_uptake() -> list[tuple[RateLaw, str]]:
    out = []
    for species, gamma, n in IODINE_UPTAKE:
        srmw = sr_mw(species)
        out.append((het.iuptk_by_sulf_1st_ord(srmw, gamma), f"{species} --> {n}AERI"))
        out.append((het.iuptk_by_sala_1st_ord(srmw, gamma), f"{species} --> {n}ISALA"))
        out.append((het.iuptk_by_salc_1st_ord(srmw, gamma), f"{species} --> {n}ISALC"))
    return out


def _iodine_breakdown() -> list[tuple[RateLaw, str]]:
    out = []
    for species, gamma, coproduct in IODINE_BREAKDOWN:
        brsala = het.ibrkdn_by_acid_brsala(species, gamma)
        brsalc = het.ibrkdn_by_acid_brsalc(species, gamma)
        salacl = het.ibrkdn_by_acid_salacl(species, gamma)
        salccl = het.ibrkdn_by_acid_salccl(species, gamma)
        out.append((brsala, f"{species} + BrSALA --> IBr{coproduct}"))
        out.append((brsalc, f"{species} + BrSALC --> IBr{coproduct}"))
        out.append((salacl, f"{species} + SALACL --> ICl{coproduct}"))
        out.append((salccl, f"{species} + SALCCL --> ICl{coproduct}"))
    return out


def _organic_uptake() -> list[tuple[RateLaw, str]]:
    out: list[tuple[RateLaw, str]] = [
        (het.glyx_uptk_1st_ord(sr_mw("GLYX")), "GLYX --> SOAGX"),
        (het.mgly_uptk_1st_ord(sr_mw("MGLY")), "MGLY --> SOAGX"),
        (het.mgly_uptk_1st_ord(sr_mw("PYAC")), "PYAC --> SOAGX"),
    ]
    for species, do_scale in (
        ("IEPOXA", False),
        ("IEPOXB", False),
        ("IEPOXD", False),
        ("HMML", True),
        ("ICHE", False),
    ):
        out.append((het.iepox_uptk_1st_ord(sr_mw(species), do_scale), f"{species} --> SOAIE"))

    voc = (
        ("LVOC", 1.0, "LVOCOA"),
        ("MVKN", 5.0e-3, "IONITA"),
        ("R4N2", 5.0e-3, "IONITA"),
        ("MONITS", 1.0e-2, "MONITA"),
        ("MONITU", 1.0e-2, "MONITA"),
        ("HONIT", 1.0e-2, "MONITA"),
        ("IHN1", 5.0e-3, "IONITA"),
        ("IHN2", 5.0e-2, "IONITA"),
        ("IHN3", 5.0e-3, "IONITA"),
        ("IHN4", 5.0e-3, "IONITA"),
        ("INPD", 5.0e-3, "IONITA"),
        ("INPB", 5.0e-3, "IONITA"),
        ("IDN", 5.0e-3, "IONITA"),
        ("ITCN", 5.0e-3, "IONITA"),
        ("ITHN", 5.0e-3, "IONITA"),
        ("MCRHNB", 5.0e-3, "IONITA"),
        ("MCRHN", 5.0e-3, "IONITA"),
        ("NPHEN", 1.0e-2, "AONITA"),
    )
    for species, gamma, product in voc:
        out.append((het.voc_uptk_1st_ord(sr_mw(species), gamma), f"{species} --> {product}"))
    return out


def het_table() -> list[tuple[RateLaw, str]]:
    """Heterogeneous rate laws and equations."""
    table: list[tuple[RateLaw, str]] = [
        (het.ho2_uptk_1st_ord(), "HO2 --> H2O"),
        (het.no2_uptk_1st_ord_and_cloud(), "NO2 --> 0.500HNO3 + 0.500HNO2"),
        (het.no3_uptk_1st_ord_and_cloud(), "NO3 --> HNO3"),
        (het.no3_hypsis_cl_on_sala(), "NO3 --> NIT"),
        (het.no3_hypsis_cl_on_salc(), "NO3 --> NITs"),
        (het.n2o5_uptk_by_h2o(), "N2O5 + H2O --> 2.000HNO3"),
        (het.n2o5_uptk_by_strat_hcl(), "N2O5 + HCl --> ClNO2 + HNO3"),
        (het.n2o5_uptk_by_cloud(), "N2O5 --> 2.000HNO3"),
        (het.n2o5_uptk_by_salacl(), "N2O5 + SALACL --> ClNO2 + HNO3"),
        (het.n2o5_uptk_by_salccl(), "N2O5 + SALCCL --> ClNO2 + HNO3"),
        (het.oh_uptk_by_salacl(), "OH + SALACL --> 0.500Cl2"),
        (het.oh_uptk_by_salccl(), "OH + SALCCL --> 0.500Cl2"),
        (het.brno3_uptk_by_h2o(), "BrNO3 + H2O --> HOBr + HNO3"),
        (het.brno3_uptk_by_hcl(), "BrNO3 + HCl --> BrCl + HNO3"),
        (het.clno3_uptk_by_h2o(), "ClNO3 + H2O --> HOCl + HNO3"),
        (het.clno3_uptk_by_hcl(), "ClNO3 + HCl --> Cl2 + HNO3"),
        (het.clno3_uptk_by_hbr(), "ClNO3 + HBr --> BrCl + HNO3"),
        (het.clno3_uptk_by_brsala(), "ClNO3 + BrSALA --> BrCl + HNO3"),
        (het.clno3_uptk_by_brsalc(), "ClNO3 + BrSALC --> BrCl + HNO3"),
        (het.clno3_uptk_by_salacl(), "ClNO3 + SALACL --> Cl2 + HNO3"),
        (het.clno3_uptk_by_salccl(), "ClNO3 + SALCCL --> Cl2 + HNO3"),
        (het.clno2_uptk_by_salacl(), "ClNO2 + SALACL --> Cl2 + HNO2"),
        (het.clno2_uptk_by_salccl(), "ClNO2 + SALCCL --> Cl2 + HNO2"),
        (het.clno2_uptk_by_hcl(), "ClNO2 + HCl --> Cl2 + HNO2"),
        (het.clno2_uptk_by_brsala(), "ClNO2 + BrSALA --> BrCl + HNO2"),
        (het.clno2_uptk_by_brsalc(), "ClNO2 + BrSALC --> BrCl + HNO2"),
        (het.clno2_uptk_by_hbr(), "ClNO2 + HBr --> BrCl + HNO2"),
        (het.hocl_uptk_by_hcl(), "HOCl + HCl --> Cl2 + H2O"),
        (het.hocl_uptk_by_hbr(), "HOCl + HBr --> BrCl + H2O"),
        (het.hocl_uptk_by_salacl(), "HOCl + SALACL --> Cl2 + H2O"),
        (het.hocl_uptk_by_salccl(), "HOCl + SALCCL --> Cl2 + H2O"),
        (het.hocl_uptk_by_hso3m() + het.hocl_uptk_by_so3mm(), "HOCl + SO2 --> SO4 + HCl"),
        (het.hobr_uptk_by_hbr(), "HOBr + HBr --> Br2 + H2O"),
        (het.hobr_uptk_by_hcl(), "HOBr + HCl --> BrCl + H2O"),
        (het.hobr_uptk_by_salacl(), "HOBr + SALACL --> BrCl + H2O"),
        (het.hobr_uptk_by_salccl(), "HOBr + SALCCL --> BrCl + H2O"),
        (het.hobr_uptk_by_brsala(), "HOBr + BrSALA --> Br2"),
        (het.hobr_uptk_by_brsalc(), "HOBr + BrSALC --> Br2"),
        (het.hobr_uptk_by_hso3m() + het.hobr_uptk_by_so3mm(), "HOBr + SO2 --> SO4 + HBr"),
        (het.o3_uptk_by_hbr(), "O3 + HBr --> HOBr"),
        (het.o3_uptk_by_brsala(), "O3 + BrSALA --> HOBr"),
        (het.o3_uptk_by_brsalc(), "O3 + BrSALC --> HOBr"),
        (het.hbr_uptk_by_sala(), "HBr --> BrSALA"),
        (het.hbr_uptk_by_salc(), "HBr --> BrSALC"),
    ]
    table.extend(_iodine_uptake())
    table.append((het.iono2_uptk_by_h2o(), "IONO2 + H2O --> HOI + HNO3"))
    table.extend(_iodine_breakdown())
    table.extend(_organic_uptake())
    return table


def heterogeneous_reactions() -> list[Reaction]:
    """Build the heterogeneous reactions."""
    return [
        Reaction.from_equation(equation, law, label=f"{law.name}: {equation}", heterogeneous=True)
        for law, equation in het_table()
    ]
