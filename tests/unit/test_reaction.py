"""Test pygaschem.core.reaction module."""

from __future__ import annotations

import logging

import pandas as pd
import pytest

from pygaschem import BuildError, ChemistryError, Reaction, ReactionTable, Species
from pygaschem.core.reaction import parse_side
from pygaschem.ratelaws import arrhenius, constant, external, photolysis
from pygaschem.ratelaws.het import ho2_uptk_1st_ord


def test_parse_side():
    """Check parsing of coefficients and the photon pseudo-species."""
    assert parse_side("O3 + NO") == (("O3", 1.0), ("NO", 1.0))
    assert parse_side("0.5CH2O + 2.000HO2") == (("CH2O", 0.5), ("HO2", 2.0))
    assert parse_side("NO2 + hv") == (("NO2", 1.0),)
    assert parse_side("1.5e-1OH") == (("OH", 0.15),)
    assert parse_side("") == ()

    with pytest.raises(BuildError, match="Cannot parse"):
        parse_side("O3 + 2.0")


def test_from_equation():
    """Check a reaction built from an equation string."""
    rxn = Reaction.from_equation("NO2 + hv --> NO + O", photolysis(11))
    assert rxn.reactants == (("NO2", 1.0),)
    assert rxn.products == (("NO", 1.0), ("O", 1.0))
    assert rxn.label == "NO2 + hv --> NO + O"
    assert rxn.order == 1
    assert rxn.species == {"NO2", "NO", "O"}
    assert not rxn.heterogeneous

    rxn = Reaction.from_equation(
        "HO2 + HO2 --> H2O2 + O2", arrhenius(3.0e-13, 0.0, 460.0), label="R9"
    )
    assert rxn.reactants == (("HO2", 2.0),)
    assert rxn.order == 2
    assert rxn.label == "R9"
    assert rxn.equation == "2HO2 --> H2O2 + O2"
    assert rxn.net_stoichiometry == {"HO2": -2.0, "H2O2": 1.0, "O2": 1.0}

    with pytest.raises(BuildError, match="missing '-->'"):
        Reaction.from_equation("O3 + NO = NO2 + O2", constant(1.0))


def test_reaction_from_pairs():
    """Check reactions built from names, pairs and mappings."""
    law = constant(1.0e-12)
    rxn = Reaction(reactants=["A", ("B", 2)], products={"C": 0.5}, rate_law=law)
    assert rxn.reactants == (("A", 1.0), ("B", 2.0))
    assert rxn.products == (("C", 0.5),)
    assert rxn.order == 3
    assert rxn.label == "A + 2B --> 0.5C"


@pytest.mark.parametrize("coeff", [0.0, -1.0, float("nan"), float("inf")])
def test_invalid_coefficient(coeff):
    """Check non-positive and non-finite coefficients are rejected."""
    with pytest.raises(BuildError, match="invalid coefficient"):
        Reaction(reactants=[("A", coeff)], products=["B"], rate_law=constant(1.0))


def test_reaction_validation():
    """Check malformed reactions raise BuildError."""
    with pytest.raises(BuildError, match="no reactants"):
        Reaction(reactants=[], products=["B"], rate_law=constant(1.0))

    with pytest.raises(BuildError, match="must be a RateLaw"):
        Reaction(reactants=["A"], products=["B"], rate_law=1.0e-12)  # type: ignore[arg-type]

    with pytest.raises(BuildError, match="'C' .* is not a reactant"):
        Reaction.from_equation("A + B --> D", constant(1.0), catalytic_divisors=["C"])

    with pytest.raises(BuildError, match="repeats a catalytic divisor"):
        Reaction.from_equation("A + B --> D", constant(1.0), catalytic_divisors=["B", "B"])

    # BuildError is a ChemistryError
    with pytest.raises(ChemistryError):
        Reaction(reactants=[], products=["B"], rate_law=constant(1.0))


def test_catalytic_divisor():
    """Check a catalytic divisor lowers the order and is not consumed."""
    rxn = Reaction.from_equation(
        "SO2 + SALAAL + O3 --> SO4", external("k_mt1", 0.0), catalytic_divisors=["SALAAL"]
    )
    assert rxn.order == 2
    assert rxn.rate_powers == (("SO2", 1.0), ("O3", 1.0))
    assert rxn.net_stoichiometry == {"SO2": -1.0, "O3": -1.0, "SO4": 1.0}

    rxn = Reaction.from_equation(
        "HMS + OH + SO2 --> 2SO4 + CH2O", external("k_cld6", 0.0), catalytic_divisors=["SO2"]
    )
    assert rxn.order == 2
    assert "SO2" not in rxn.net_stoichiometry
    assert rxn.net_stoichiometry["SO4"] == 2.0


def test_non_mass_action():
    """Check reactions with mass_action=False are zero order."""
    rxn = Reaction.from_equation("A + B --> C", constant(5.0), mass_action=False)
    assert rxn.order == 0
    assert rxn.rate_powers == ()
    assert rxn.net_stoichiometry == {"A": -1.0, "B": -1.0, "C": 1.0}


def test_table_species():
    """Check species declaration and lookup."""
    table = ReactionTable(
        [Species("O3", 40.0), "NO", Species("NO2", 2.0)],
        [Reaction.from_equation("O3 + NO --> NO2", arrhenius(3.0e-12, 0.0, -1500.0))],
    )
    assert table.species_names == ["O3", "NO", "NO2"]
    assert table.species_index("NO2") == 2
    assert table.defaults().tolist() == [40.0, 0.0, 2.0]
    assert len(table) == 1
    assert table[0].label == "O3 + NO --> NO2"
    assert repr(table) == "ReactionTable [3 species, 1 reactions]"

    with pytest.raises(KeyError, match="not declared"):
        table.species_index("OH")

    with pytest.raises(BuildError, match="non-empty string"):
        Species("")


def test_table_duplicate_species():
    """Check species may be declared once."""
    with pytest.raises(BuildError, match="'O3' is declared more than once"):
        ReactionTable(["O3", "NO", "O3"], [])


def test_table_undeclared_species():
    """Check undeclared species are named in the error."""
    rxn = Reaction.from_equation("O3 + NO --> NO2 + O2", arrhenius(3.0e-12, 0.0, -1500.0))
    with pytest.raises(BuildError, match="undeclared species: NO2, O2"):
        ReactionTable(["O3", "NO"], [rxn])


def test_table_order_mismatch():
    """Check a rate law of fixed order must match its reaction."""
    rxn = Reaction.from_equation("HO2 + NO --> OH + NO2", ho2_uptk_1st_ord())
    with pytest.raises(BuildError, match="of order 1 is attached to reaction"):
        ReactionTable(["HO2", "NO", "OH", "NO2"], [rxn])

    # Zero order reactions accept any law
    rxn = Reaction.from_equation(
        "HO2 + NO --> OH + NO2", ho2_uptk_1st_ord(), mass_action=False
    )
    ReactionTable(["HO2", "NO", "OH", "NO2"], [rxn])


def test_table_unused_species(caplog):
    """Check unused species are logged."""
    rxn = Reaction.from_equation("O3 + NO --> NO2", arrhenius(3.0e-12, 0.0, -1500.0))
    with caplog.at_level(logging.DEBUG, logger="pygaschem.core.reaction"):
        ReactionTable(["O3", "NO", "NO2", "CO", "CH4"], [rxn])
    assert "2 declared species take part in no reaction" in caplog.text


def test_table_select(small_table):
    """Check selecting heterogeneous or gas phase reactions."""
    rxn = Reaction.from_equation("O3 --> O2", constant(1.0e-6), heterogeneous=True)
    table = ReactionTable(small_table.species, (*small_table.reactions, rxn))

    assert len(table.select()) == 5
    assert len(table.select(heterogeneous=False)) == 4
    het = table.select(heterogeneous=True)
    assert len(het) == 1
    assert het.species == table.species


def test_to_dataframe(small_table):
    """Check the reaction summary."""
    df = small_table.to_dataframe()
    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == [
        "label",
        "equation",
        "rate_law",
        "order",
        "unit",
        "catalytic_divisors",
        "heterogeneous",
        "mass_action",
    ]
    assert len(df) == 4
    assert df["order"].tolist() == [2, 1, 2, 2]
    assert df["rate_law"].tolist() == ["ARR", "PHOTOL", "ARR_M", "GCJPLPR_abab"]
    assert df.loc[1, "unit"] == "s-1"
    assert df.loc[0, "equation"] == "O3 + NO --> NO2 + O2"
    assert not df["heterogeneous"].any()
