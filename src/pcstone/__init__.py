"""
PCStone
-------
Two-player arcade cake fight. The simulation core (entities, systems,
core.runtime.frame) has no pygame dependency; the pygame front end lives
in core.runtime.main_loop, core.services.input_manager and graphics.
"""

__version__ = "1.0.0"
