"""
Activations Package

This package provides the activation functions of the feed-forward network.

Exported:
    relu_activation: Rectified-linear activation, max(0, z)
"""

from evonet.activations.basic_activations import relu_activation

__all__ = ['relu_activation']
