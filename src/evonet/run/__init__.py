"""
Run Package

This package holds the configuration of an evolutionary run.

Modules:
    config: Configuration management (INI files) for the genetic algorithm and network

Exported Classes:
    Config: Configuration parameters for the genetic algorithm and network
"""

from evonet.run.config import Config

__all__ = ['Config']
