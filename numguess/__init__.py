"""
numguess - Guess the Number

A small interactive guessing game split into a model, a controller and
interchangeable front-ends:
- GameSession holds one round (secret, attempts, outcome)
- SessionController validates raw input and produces display snapshots
- Terminal and web front-ends drive the controller through explicit wiring
"""

__version__ = "0.1.0"
