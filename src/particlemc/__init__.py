"""particlemc — random variates and trajectory export for particle Monte Carlo."""

__version__ = "0.1.0"

from particlemc.config.defaults import default_run_config as default_run_config
from particlemc.config.schema import BoxConfig as BoxConfig
from particlemc.config.schema import DemoConfig as DemoConfig
from particlemc.config.schema import ExportConfig as ExportConfig
from particlemc.config.schema import RunConfig as RunConfig
from particlemc.config.schema import SamplerConfig as SamplerConfig
from particlemc.core.particles import Box as Box
from particlemc.core.particles import Particle as Particle
from particlemc.core.rng import RandomVariateService as RandomVariateService
from particlemc.core.rng import make_rng as make_rng
from particlemc.core.rng import spawn_services as spawn_services
from particlemc.demo import run_random_walk as run_random_walk
from particlemc.io.vmd import write_vmd_script as write_vmd_script
from particlemc.io.xyz import append_xyz_trajectory as append_xyz_trajectory
