"""vcxgen -- generates Visual Studio project files for a folder of C++ code.

Quick usage::

    from vcxgen import GeneratorConfig, ProjectGenerator

    config = GeneratorConfig(project_name="Game", code_folder="code")
    result = ProjectGenerator(config).generate()
"""

from vcxgen.config import GeneratorConfig
from vcxgen.generator import (
    ArtifactWriteError,
    GenerationResult,
    ProjectFiles,
    ProjectGenerator,
    ScanRootError,
)

__all__ = [
    "ArtifactWriteError",
    "GenerationResult",
    "GeneratorConfig",
    "ProjectFiles",
    "ProjectGenerator",
    "ScanRootError",
]

__version__ = "0.1.0"
