# -*- coding: utf-8 -*-
__license__ = "MIT"
__version__ = "1.0.0"

import numpy as np
import warnings

from . import settings
from . import utils
from .settings import verbosity, log_directory
from .core import Algorithm_kind, Color, Pixel_event, Algorithm
from .viewport import Viewport
from .params import Parameter_store, PARAMETER_PRESETS
from .driver import Render_driver, Run_state, Run_status
from .surface import Pixel_surface
from .host import Host_loop
from .log import set_log_handlers

# Disable numpy warnings: diverging orbits overflow
if verbosity < 3:
    np.seterr(all="ignore")
    warnings.filterwarnings(
        action="ignore",
        message="invalid value encountered in"
    )
    warnings.filterwarnings(
        action="ignore",
        message="overflow encountered in"
    )
