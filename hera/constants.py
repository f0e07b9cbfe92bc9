# Beam energies in GeV (natural units, c = 1)
E_ELECTRON = 27.5

PROTON_ENERGIES = {
    "HER": 920.0,
    "MER": 575.0,
    "LER": 460.0,
}

# Generation phase space (GeV^2 for Q2)
Q2_MIN = 1.0
Q2_MAX = 40000.0
X_MIN = 1e-5
X_MAX = 0.8

# Inelasticity acceptance window, exclusive on both ends
Y_MIN = 0.005
Y_MAX = 0.95

# Toy ISR: fraction of attempts that radiate, and the electron energy
# that must survive the emission
ISR_PROBABILITY = 0.25
MIN_ELECTRON_ENERGY = 2.0

MAX_ATTEMPTS = 100

# Kinematic limit curve (y = 1)
LIMIT_X_MIN = 1e-5
LIMIT_X_MAX = 1.0
LIMIT_STEPS = 20

# Thresholds used when the run mode is ALL
ALL_MODE_THRESHOLDS = (0.33, 0.66)

# Explorer run loop
BATCH_SIZE = 5
DISPLAY_BUFFER_SIZE = 800
LUMINOSITY_PER_TICK = 0.01  # pb^-1
