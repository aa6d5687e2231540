# Dice defaults
DEFAULT_SIDES = 6
DEFAULT_TRIALS = 5  # Rolls per "roll" command / demo run

# OneThroughTen bounds (inclusive)
ONE_THROUGH_TEN_LOW = 1
ONE_THROUGH_TEN_HIGH = 10

# Linear congruential generator constants
LCG_MODULUS = 139968
LCG_MULTIPLIER = 3877
LCG_INCREMENT = 29573
LCG_DEFAULT_SEED = 42

# Generator registry names
GENERATOR_ONE_THROUGH_TEN = "one_through_ten"
GENERATOR_LCG = "lcg"
DEFAULT_GENERATOR = GENERATOR_ONE_THROUGH_TEN

# Starship naming
NAME_SEPARATOR = " "  # Between prefix and name, e.g. "USS Enterprise"

# Logging
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
