"""Photolysis reactions of the GEOS-Chem full chemistry mechanism.

Each reaction reads its photolysis frequency, [:math:`s^{-1}`], from
:attr:`EnvironmentContext.j_values` by 1-based index. Indices beyond the end
of the supplied array evaluate to 0.
"""

from __future__ import annotations

from pygaschem.core.reaction import Reaction
from pygaschem.ratelaws.gas import photolysis

#: Photolysis reactions: 1-based j-value index and equation
PHOTOLYSIS: tuple[tuple[int, str], ...] = (
    (2, "O3 + hv --> O + O2"),
    (3, "O3 + hv --> O1D + O2"),
    (1, "O2 + hv --> 2.000O"),
    (11, "NO2 + hv --> NO + O"),
    (9, "H2O2 + hv --> OH + OH"),
    (10, "MP + hv --> CH2O + HO2 + OH"),
    (7, "CH2O + hv --> HO2 + H + CO"),
    (8, "CH2O + hv --> H2 + CO"),
    (16, "HNO3 + hv --> OH + NO2"),
    (15, "HNO2 + hv --> OH + NO"),
    (17, "HNO4 + hv --> OH + NO3"),
    (18, "HNO4 + hv --> HO2 + NO2"),
    (12, "NO3 + hv --> NO2 + O"),
    (13, "NO3 + hv --> NO + O2"),
    (14, "N2O5 + hv --> NO3 + NO2"),
    (61, "ALD2 + hv --> 0.880MO2 + HO2 + 0.880CO + 0.120MCO3"),
    (62, "ALD2 + hv --> CH4 + CO"),
    (59, "PAN + hv --> 0.700MCO3 + 0.700NO2 + 0.300MO2 + 0.300NO3"),
    (70, "RCHO + hv --> 0.500OTHRO2 + HO2 + CO + 0.070A3O2 + 0.270B3O2"),
    (76, "ACET + hv --> MCO3 + MO2"),
    (77, "ACET + hv --> 2.000MO2 + CO"),
    (69, "MEK + hv --> 0.850MCO3 + 0.425OTHRO2 + 0.150MO2 + 0.150RCO3 + 0.060A3O2 + 0.230B3O2"),
    (68, "GLYC + hv --> 0.900CH2O + 1.730HO2 + CO + 0.070OH + 0.100MOH"),
    (72, "GLYX + hv --> 2.000HO2 + 2.000CO"),
    (73, "GLYX + hv --> H2 + 2.000CO"),
    (74, "GLYX + hv --> CH2O + CO"),
    (71, "MGLY + hv --> MCO3 + CO + HO2"),
    (63, "MVK + hv --> PRPE + CO"),
    (64, "MVK + hv --> MCO3 + CH2O + CO + HO2"),
    (65, "MVK + hv --> MO2 + RCO3"),
    (66, "MACR + hv --> CO + HO2 + CH2O + MCO3"),
    (75, "HAC + hv --> MCO3 + CH2O + HO2"),
    (79, "PRPN + hv --> OH + HO2 + RCHO + NO2"),
    (80, "ETP + hv --> OH + HO2 + ALD2"),
    (81, "RA3P + hv --> OH + HO2 + RCHO"),
    (82, "RB3P + hv --> OH + HO2 + ACET"),
    (83, "R4P + hv --> OH + HO2 + RCHO"),
    (84, "PP + hv --> OH + HO2 + ALD2 + CH2O"),
    (85, "RP + hv --> OH + HO2 + ALD2"),
    (
        98,
        "R4N2 + hv --> NO2 + 0.320ACET + 0.190MEK + 0.180MO2 + 0.270HO2 + 0.320ALD2 + 0.130RCHO + 0.050A3O2 + 0.180B3O2 + 0.320OTHRO2",  # noqa: E501
    ),
    (99, "MAP + hv --> OH + MO2"),
    (23, "Br2 + hv --> 2.000Br"),
    (28, "BrO + hv --> Br + O"),
    (32, "HOBr + hv --> Br + OH"),
    (29, "BrNO3 + hv --> Br + NO3"),
    (30, "BrNO3 + hv --> BrO + NO2"),
    (31, "BrNO2 + hv --> Br + NO2"),
    (56, "CHBr3 + hv --> 3.000Br"),
    (55, "CH2Br2 + hv --> 2.000Br"),
    (50, "CH3Br + hv --> MO2 + Br"),
    (43, "CH3Cl + hv --> MO2 + Cl"),
    (45, "CH2Cl2 + hv --> 2.000Cl"),
    (33, "BrCl + hv --> Br + Cl"),
    (22, "Cl2 + hv --> 2.000Cl"),
    (27, "ClO + hv --> Cl + O"),
    (25, "OClO + hv --> ClO + O"),
    (26, "Cl2O2 + hv --> Cl + ClOO"),
    (21, "ClNO2 + hv --> Cl + NO2"),
    (19, "ClNO3 + hv --> Cl + NO3"),
    (20, "ClNO3 + hv --> ClO + NO2"),
    (24, "HOCl + hv --> Cl + OH"),
    (44, "CH3CCl3 + hv --> 3.000Cl"),
    (42, "CCl4 + hv --> 4.000Cl"),
    (37, "CFC11 + hv --> 3.000Cl"),
    (38, "CFC12 + hv --> 2.000Cl"),
    (39, "CFC113 + hv --> 3.000Cl"),
    (40, "CFC114 + hv --> 2.000Cl"),
    (41, "CFC115 + hv --> Cl"),
    (47, "HCFC123 + hv --> 2.000Cl"),
    (48, "HCFC141b + hv --> 2.000Cl"),
    (49, "HCFC142b + hv --> Cl"),
    (46, "HCFC22 + hv --> Cl"),
    (53, "H1301 + hv --> Br"),
    (51, "H1211 + hv --> Cl + Br"),
    (54, "H2402 + hv --> 2.000Br"),
    (101, "ClOO + hv --> Cl + O2"),
    (114, "I2 + hv --> 2.000I"),
    (115, "HOI + hv --> I + OH"),
    (116, "IO + hv --> I + O"),
    (117, "OIO + hv --> I + O2"),
    (118, "INO + hv --> I + NO"),
    (119, "IONO + hv --> I + NO2"),
    (120, "IONO2 + hv --> I + NO3"),
    (121, "I2O2 + hv --> I + OIO"),
    (122, "CH3I + hv --> I"),
    (123, "CH2I2 + hv --> 2.000I"),
    (124, "CH2ICl + hv --> I + Cl"),
    (125, "CH2IBr + hv --> I + Br"),
    (126, "I2O4 + hv --> 2.000OIO"),
    (127, "I2O3 + hv --> OIO + IO"),
    (128, "IBr + hv --> I + Br"),
    (129, "ICl + hv --> I + Cl"),
    (103, "MPN + hv --> CH2O + NO3 + HO2"),
    (104, "MPN + hv --> MO2 + NO2"),
    (97, "ATOOH + hv --> OH + CH2O + MCO3"),
    (36, "N2O + hv --> N2 + O1D"),
    (34, "OCS + hv --> SO2 + CO"),
    (100, "SO4 + hv --> SO2 + 2.000OH"),
    (6, "NO + hv --> O + N"),
    (105, "PIP + hv --> RCHO + OH + HO2"),
    (107, "ETHLN + hv --> NO2 + CH2O + CO + HO2"),
    (111, "MONITS + hv --> MEK + NO2"),
    (112, "MONITU + hv --> RCHO + NO2"),
    (113, "HONIT + hv --> HAC + NO2"),
    (130, "NITs + hv --> HNO2"),
    (131, "NITs + hv --> NO2"),
    (132, "NIT + hv --> HNO2"),
    (133, "NIT + hv --> NO2"),
    (134, "MENO3 + hv --> NO2 + HO2 + CH2O"),
    (135, "ETNO3 + hv --> NO2 + HO2 + ALD2"),
    (136, "IPRNO3 + hv --> NO2 + HO2 + ACET"),
    (137, "NPRNO3 + hv --> NO2 + HO2 + RCHO"),
    (86, "HMHP + hv --> 2OH + CH2O"),
    (87, "HPETHNL + hv --> OH + CO + HO2 + CH2O"),
    (88, "PYAC + hv --> MCO3 + CO2 + HO2"),
    (89, "PROPNN + hv --> NO2 + CH2O + MCO3"),
    (90, "MVKHC + hv --> CO + HO2 + CH2O + MCO3"),
    (91, "MVKHCB + hv --> 0.5GLYX + 1.5HO2 + 0.5MCO3 + 0.5CO + 0.5MGLY"),
    (92, "MVKHP + hv --> 0.53MCO3 + 0.53GLYC + OH + 0.47HO2 + 0.47CH2O + 0.47MGLY"),
    (93, "MVKPC + hv --> OH + 0.571CO + 0.571MGLY + 0.571HO2 + 0.429GLYX + 0.429MCO3"),
    (
        94,
        "MCRENOL + hv --> 0.875CO + 0.75PYAC + 1.75OH + 0.125MGLY + 0.125HO2 + 0.125MCO3 + 0.125GLYX",  # noqa: E501
    ),
    (95, "MCRHP + hv --> OH + 0.77CO + HO2 + 0.77HAC + 0.23MGLY + 0.23CH2O"),
    (96, "MACR1OOH + hv --> 0.75OH + 1.238CO2 + 0.488MO2 + 0.75CH2O + 0.262MCO3 + 0.25MACR1OOH"),
    (108, "MVKN + hv --> 0.290HO2 + 0.010OH + 0.700NO2 + 1.010MCO3 + 0.690GLYC + 0.300ETHLN"),
    (109, "MCRHN + hv --> HAC + CO + HO2 + NO2"),
    (110, "MCRHNB + hv --> PROPNN + OH + CO + HO2"),
    (138, "RIPA + hv --> MVK + CH2O + HO2 + OH"),
    (139, "RIPB + hv --> MACR + CH2O + HO2 + OH"),
    (140, "RIPC + hv --> OH + HO2 + HC5A"),
    (141, "RIPD + hv --> OH + HO2 + HC5A"),
    (
        142,
        "HPALD1 + hv --> 0.888CO + 1.662OH + 0.112HO2 + 0.112IDC + 0.112MVKPC + 0.552MCRENOL + 0.224C4HVP1",  # noqa: E501
    ),
    (
        143,
        "HPALD2 + hv --> 0.818CO + 1.637OH + 0.182HO2 + 0.182IDC + 0.182MVKPC + 0.455MCRENOL + 0.182C4HVP2",  # noqa: E501
    ),
    (144, "HPALD3 + hv --> CO + OH + HO2 + MVK"),
    (145, "HPALD4 + hv --> CO + OH + HO2 + MACR"),
    (146, "IHN1 + hv --> NO2 + 0.45HC5A + 0.45HO2 + 0.55MVKHP + 0.55CO + 0.55OH"),
    (147, "IHN2 + hv --> NO2 + MVK + HO2 + CH2O"),
    (148, "IHN3 + hv --> NO2 + MACR + HO2 + CH2O"),
    (149, "IHN4 + hv --> NO2 + 0.45HC5A + 0.45HO2 + 0.55MCRHP + 0.55CO + 0.55OH"),
    (150, "INPB + hv --> NO2 + CH2O + 0.097MACR + 0.903MVK + 0.67OH + 0.33HO2"),
    (151, "INPD + hv --> OH + 0.159HO2 + 0.159ICN + 0.841INA"),
    (152, "INPD + hv --> NO2 + 0.841IHOO1 + 0.159IHOO4"),
    (
        106,
        "ICN + hv --> NO2 + 0.839CO + 0.645OH + 0.161HO2 + 0.161IDC + 0.162MVKPC + 0.481MCRENOL + 0.128C4HVP2 + 0.068C4HVP1",  # noqa: E501
    ),
    (
        78,
        "IDN + hv --> 1.555NO2 + 0.5GLYC + 0.5HAC + 0.05MVK + 0.005MACR + 0.055CH2O + 0.227INA + 0.228ICN + 0.228HO2",  # noqa: E501
    ),
    (153, "ICPDH + hv --> CO + 1.5HO2 + 0.5OH + 0.5MCRHP + 0.35MVKDH + 0.15MCRDH"),
    (
        154,
        "ICPDH + hv --> OH + HO2 + 0.122CO + 0.1CH2O + 0.1MVKHCB + 0.438HAC + 0.438GLYX + 0.088GLYC + 0.088MGLY + 0.122MCRDH",  # noqa: E501
    ),
    (155, "IDHDP + hv --> 1.25OH + 0.25GLYC + 0.25HAC + 0.75ICPDH + 0.75HO2"),
    (156, "IDHPE + hv --> OH + HO2 + 0.429MGLY + 0.429GLYC + 0.571GLYX + 0.571HAC"),
    (157, "IDCHP + hv --> 0.546OH + CO + 1.454HO2 + 0.391MVKHC + 0.155MVKHCB + 0.454MVKPC"),
    (
        158,
        "ITHN + hv --> OH + 0.7HO2 + 0.55CH2O + 0.5MCRHN + 0.3GLYC + 0.45HAC + 0.3NO2 + 0.15ETHLN + 0.05MVKN",  # noqa: E501
    ),
    (
        159,
        "ITHN + hv --> NO2 + 0.8HAC + 0.7HO2 + 0.5HPETHNL + 0.35GLYC + 0.15CH2O + 0.15MCRHP + 0.05ATOOH + 0.3OH",  # noqa: E501
    ),
    (160, "ITCN + hv --> MGLY + OH + NO2 + GLYC"),
    (161, "ITCN + hv --> 0.5MVKHP + 0.5MCRHP + CO + NO2 + HO2"),
    (162, "ETHP + hv --> ETO + OH"),
    (163, "BALD + hv --> BENZO2 + CO + HO2"),
    (164, "BZCO3H + hv --> BENZO2 + OH + CO2"),
    (165, "BENZP + hv --> BENZO"),
    (166, "NPHEN + hv --> HNO2 + CO + CO2 + AROMP4 + HO2"),
)


def photolysis_reactions() -> list[Reaction]:
    """Build the photolysis reactions."""
    return [
        Reaction.from_equation(equation, photolysis(index), label=f"j_{index}: {equation}")
        for index, equation in PHOTOLYSIS
    ]
