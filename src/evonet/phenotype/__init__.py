"""
Phenotype Package

This package implements the feed-forward neural network whose weights and
biases can be decoded from a genome.

Modules:
    network: Neuron, Layer and Network classes

Exported Classes:
    Neuron:  A weighted sum of its inputs plus a bias, passed through ReLU
    Layer:   An ordered collection of neurons sharing the same inputs
    Network: An ordered stack of layers
"""

from evonet.phenotype.network import Layer, Network, Neuron

__all__ = ['Layer',
           'Network',
           'Neuron']
