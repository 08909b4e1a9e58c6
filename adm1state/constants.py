"""Canonical field tables for the ADM1 digester state vectors.

Both record kinds share the 37 leading state variables of the BSM2 adjusted
IAWQ Anaerobic Digestion Model No. 1 and differ only in the five trailing
slots.  Defaults are literal values: sludge digester steady state for the
initial conditions and a typical untreated feed for the influent.  They are
kept as the canonical default set and are not re-derived.
"""
from __future__ import annotations

from typing import Tuple

# Number of values in a fully specified record of either kind
RECORD_WIDTH: int = 42

# Field separator of the delimited text format
DEFAULT_DELIMITER: str = ";"

# (name, unit, description) of the leading fields common to both kinds
COMMON_FIELDS: Tuple[Tuple[str, str, str], ...] = (
    # soluble species
    ("S_su", "kg COD m^-3", "monosaccharides"),
    ("S_aa", "kg COD m^-3", "amino acids"),
    ("S_fa", "kg COD m^-3", "total long chain fatty acids (LCFA)"),
    ("S_va", "kg COD m^-3", "total valerate"),
    ("S_bu", "kg COD m^-3", "total butyrate"),
    ("S_pro", "kg COD m^-3", "total propionate"),
    ("S_ac", "kg COD m^-3", "total acetate"),
    ("S_h2", "kg COD m^-3", "hydrogen gas"),
    ("S_ch4", "kg COD m^-3", "methane gas"),
    ("S_IC", "kmole C m^-3", "inorganic carbon"),
    ("S_IN", "kmole N m^-3", "inorganic nitrogen"),
    ("S_I", "kg COD m^-3", "soluble inerts"),
    # particulate species
    ("X_xc", "kg COD m^-3", "composites"),
    ("X_ch", "kg COD m^-3", "carbohydrates"),
    ("X_pr", "kg COD m^-3", "proteins"),
    ("X_li", "kg COD m^-3", "lipids"),
    ("X_su", "kg COD m^-3", "sugar degraders"),
    ("X_aa", "kg COD m^-3", "amino acid degraders"),
    ("X_fa", "kg COD m^-3", "LCFA degraders"),
    ("X_c4", "kg COD m^-3", "valerate and butyrate degraders"),
    ("X_pro", "kg COD m^-3", "propionate degraders"),
    ("X_ac", "kg COD m^-3", "acetate degraders"),
    ("X_h2", "kg COD m^-3", "hydrogen degraders"),
    ("X_I", "kg COD m^-3", "particulate inerts"),
    # ion balance
    ("S_cat", "kmole m^-3", "cations (metallic ions, strong base)"),
    ("S_an", "kmole m^-3", "anions (metallic ions, strong acid)"),
    # ionic equilibrium; the S_h* slots hold the dissociated ion
    ("S_hva", "kg COD m^-3", "valerate ion"),
    ("S_hbu", "kg COD m^-3", "butyrate ion"),
    ("S_hpro", "kg COD m^-3", "propionate ion"),
    ("S_hac", "kg COD m^-3", "acetate ion"),
    ("S_hco3", "kmole C m^-3", "bicarbonate"),
    ("S_nh3", "kmole N m^-3", "ammonia"),
    # gas phase
    ("S_gas_h2", "kg COD m^-3", "hydrogen concentration in gas phase"),
    ("S_gas_ch4", "kg COD m^-3", "methane concentration in gas phase"),
    ("S_gas_co2", "kmole C m^-3", "carbon dioxide concentration in gas phase"),
    ("Q_D", "m^3 d^-1", "flow rate"),
    ("T_D", "degC", "temperature"),
)

INITIAL_TRAILING_FIELDS: Tuple[Tuple[str, str, str], ...] = (
    ("Q_gas", "m^3 d^-1", "gas flow"),
    ("P_gas_ch4", "bar", "methane partial pressure"),
    ("COD", "kg COD m^-3", "chemical oxygen demand"),
    ("S_gas_h2s", "kg COD m^-3", "hydrogen sulfide concentration in gas phase"),
    ("aux", "-", "auxiliary output"),
)

INFLUENT_TRAILING_FIELDS: Tuple[Tuple[str, str, str], ...] = (
    ("Q_gas", "m^3 d^-1", "gas flow placeholder"),
    ("gas_vol", "m^3 d^-1", "gas volume"),
    ("pH", "-", "pH"),
    ("S_gas_h2s", "kg COD m^-3", "hydrogen sulfide placeholder"),
    ("aux", "-", "auxiliary output"),
)

# Sludge digester steady state
INITIAL_DEFAULTS: Tuple[float, ...] = (
    0.012, 0.0053, 0.099, 0.012, 0.013, 0.016, 0.2, 2.30e-7, 0.055, 0.15, 0.13, 0.033,
    0.31, 0.028, 0.1, 0.029, 0.42, 1.18, 0.24, 0.43, 0.14, 0.76, 0.32, 25.6,
    0.04, 0.02,
    0.011, 0.013, 0.016, 0.2, 0.14, 0.0041,
    1.02e-5, 1.63, 0.014,
    0.0,   # Q_D is set by the influent
    35.0,
    0.0, 0.0, 0.0, 0.0, 0.0,
)

# Typical untreated feed
INFLUENT_DEFAULTS: Tuple[float, ...] = (
    0.01, 0.001, 0.001, 0.001, 0.001, 0.001, 0.001, 1.0e-8, 1.0e-5, 0.04, 0.01, 0.02,
    2.0, 5.0, 20.0, 5.0, 0.0, 0.01, 0.01, 0.01, 0.01, 0.01, 0.01, 25.0,
    0.04, 0.02,
    0.0, 0.0, 0.0, 0.0, 0.0, 0.0,   # carried over from the digester
    0.0, 0.0, 0.0,
    170.0,
    0.0,   # T_D is set by the digester
    0.0, 0.0, 0.0, 0.0, 0.0,
)

# Fields a solver hands over between digester and feed records
EQUILIBRIUM_FIELDS: Tuple[str, ...] = ("S_hva", "S_hbu", "S_hpro", "S_hac", "S_hco3", "S_nh3")
GAS_PHASE_FIELDS: Tuple[str, ...] = ("S_gas_h2", "S_gas_ch4", "S_gas_co2")

FIELD_ALIASES = {
    "flow_rate": "Q_D",
    "temperature": "T_D",
}

__all__ = [
    "RECORD_WIDTH",
    "DEFAULT_DELIMITER",
    "COMMON_FIELDS",
    "INITIAL_TRAILING_FIELDS",
    "INFLUENT_TRAILING_FIELDS",
    "INITIAL_DEFAULTS",
    "INFLUENT_DEFAULTS",
    "EQUILIBRIUM_FIELDS",
    "GAS_PHASE_FIELDS",
    "FIELD_ALIASES",
]
