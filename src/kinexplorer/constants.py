"""Physical constants and sweep ranges for the kinetics explorer."""

R_GAS = 8.314  # J/(mol*K)

PRE_EXPONENTIAL = 1.0e13  # s^-1 or M^-1 s^-1 depending on order
ACTIVATION_ENERGY_BASE = 50000.0  # J/mol
ACTIVATION_ENERGY_CATALYST = 30000.0  # J/mol

ZERO_CELSIUS = 273.0  # K, as used for the chart axis

# Slider bounds of the explorer
TEMPERATURE_MIN = 273.0
TEMPERATURE_MAX = 373.0
CONCENTRATION_MIN = 0.1
CONCENTRATION_MAX = 3.0
CONCENTRATION_STEP = 0.1

# Sweeps
TEMPERATURE_SWEEP = (273.0, 373.0, 5.0)
CONCENTRATION_SWEEP = (CONCENTRATION_MIN, CONCENTRATION_MAX, CONCENTRATION_STEP)
ARRHENIUS_SWEEP = (273.0, 373.0, 10.0)
