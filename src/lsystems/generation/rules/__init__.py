from lsystems.generation.families import Family
from lsystems.generation.rules.barnsley import BarnsleyEngine
from lsystems.generation.rules.base import RuleEngine, SymbolRule
from lsystems.generation.rules.cracked_earth import CrackedEarthEngine
from lsystems.generation.rules.fractal_plant import FractalPlantEngine
from lsystems.generation.rules.lichtenberg import LichtenbergEngine
from lsystems.generation.rules.original import OriginalEngine
from lsystems.generation.rules.porpita import PorpitaEngine

ENGINES: dict[Family, type[RuleEngine]] = {
    engine.family: engine
    for engine in (
        OriginalEngine,
        BarnsleyEngine,
        FractalPlantEngine,
        LichtenbergEngine,
        CrackedEarthEngine,
        PorpitaEngine,
    )
}


def engine_for(family: Family) -> type[RuleEngine]:
    return ENGINES[Family.parse(family)]


__all__ = [
    "ENGINES",
    "BarnsleyEngine",
    "CrackedEarthEngine",
    "FractalPlantEngine",
    "LichtenbergEngine",
    "OriginalEngine",
    "PorpitaEngine",
    "RuleEngine",
    "SymbolRule",
    "engine_for",
]
