"""Sample-at-a-time audio DSP building blocks: dynamics, triggers, generators, phase and WAV I/O."""

__version__ = "0.1.0"