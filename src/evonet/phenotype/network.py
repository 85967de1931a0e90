"""
Feed-Forward Network Module

This module implements a deterministic, fully connected feed-forward neural
network with rectified-linear activation. The network does not learn: it
evaluates inputs with whatever weights it holds, which are either drawn at
random or decoded from a flat sequence of reals (typically a Genome).

Classes:
    Neuron:  A weighted sum of its inputs plus a bias, passed through ReLU
    Layer:   An ordered collection of neurons sharing the same inputs
    Network: An ordered stack of layers
"""

import numpy as np
from typing import Iterable, Sequence, TYPE_CHECKING
import graphviz  # type: ignore

from evonet.activations import relu_activation

if TYPE_CHECKING:
    from evonet.run.config import Config

class Neuron:
    """
    A single neuron of a feed-forward network.

    The neuron computes:
        output = max(0, bias + dot(weights, inputs))

    Public Attributes:
        bias:    Bias added to the weighted sum of the inputs
        weights: One weight per input (float32 array)

    Public Methods:
        evaluate(inputs): Compute the output of this neuron

    Class Methods:
        random(rng, input_size, weight_range): Create a neuron with random parameters
    """

    def __init__(self, bias: float, weights: Iterable[float]):
        """
        Parameters:
            bias:    Bias added to the weighted sum of the inputs
            weights: One weight per input
        """
        self.bias   : np.float32 = np.float32(bias)
        self.weights: np.ndarray = np.array(list(weights), dtype=np.float32)

    @classmethod
    def random(cls, rng: np.random.Generator, input_size: int, weight_range: float = 1.0) -> 'Neuron':
        """
        Create a neuron whose bias and weights are drawn uniformly from [-weight_range, weight_range].

        Parameters:
            rng:          The random number generator to draw from
            input_size:   Number of inputs (and therefore weights)
            weight_range: Half-width of the uniform distribution

        Returns:
            The new Neuron
        """
        bias    = rng.uniform(-weight_range, weight_range)
        weights = rng.uniform(-weight_range, weight_range, size=input_size)
        return cls(bias, weights)

    @property
    def input_size(self) -> int:
        """The number of inputs this neuron expects."""
        return self.weights.shape[0]

    def evaluate(self, inputs: Sequence[float]) -> float:
        """
        Compute the output of this neuron.

        Parameters:
            inputs: One value per weight

        Returns:
            max(0, bias + dot(weights, inputs))
        """
        inputs = np.asarray(inputs, dtype=np.float32)
        if inputs.shape != self.weights.shape:
            raise ValueError(f"Expected {self.input_size} inputs, got {inputs.shape[0] if inputs.ndim else 0}")
        return float(relu_activation(self.bias + np.dot(self.weights, inputs)))

    def __repr__(self):
        return f"Neuron(bias={self.bias:+.3f}, inputs={self.input_size})"

class Layer:
    """
    A layer of neurons, all reading the same input vector.

    The layer maps its input vector to one output per neuron.

    Public Attributes:
        neurons: The neurons of this layer, in output order

    Public Properties:
        input_size:  Number of inputs every neuron expects
        output_size: Number of neurons (and therefore outputs)

    Public Methods:
        evaluate(inputs): Compute the outputs of all neurons

    Class Methods:
        random(rng, input_size, output_size, weight_range): Create a layer with random parameters
    """

    def __init__(self, neurons: Sequence[Neuron]):
        """
        Parameters:
            neurons: The neurons of the layer (at least one, all with the same number of inputs)
        """
        neurons = list(neurons)
        if not neurons:
            raise ValueError("A layer needs at least one neuron")

        input_sizes = {neuron.input_size for neuron in neurons}
        if len(input_sizes) != 1:
            raise ValueError(f"All neurons of a layer must have the same number of inputs, got {sorted(input_sizes)}")

        self.neurons: list[Neuron] = neurons

    @classmethod
    def random(cls,
               rng         : np.random.Generator,
               input_size  : int,
               output_size : int,
               weight_range: float = 1.0) -> 'Layer':
        """
        Create a layer of 'output_size' random neurons, each reading 'input_size' inputs.

        Parameters:
            rng:          The random number generator to draw from
            input_size:   Number of inputs of the layer
            output_size:  Number of neurons of the layer
            weight_range: Half-width of the uniform distribution of weights and biases

        Returns:
            The new Layer
        """
        return cls([Neuron.random(rng, input_size, weight_range) for _ in range(output_size)])

    @property
    def input_size(self) -> int:
        return self.neurons[0].input_size

    @property
    def output_size(self) -> int:
        return len(self.neurons)

    def evaluate(self, inputs: Sequence[float]) -> np.ndarray:
        """
        Compute the outputs of all neurons of the layer.

        Parameters:
            inputs: The input vector (input_size values)

        Returns:
            One output per neuron (float32 array)
        """
        inputs = np.asarray(inputs, dtype=np.float32)
        return np.array([neuron.evaluate(inputs) for neuron in self.neurons], dtype=np.float32)

    def __repr__(self):
        return f"Layer(inputs={self.input_size}, outputs={self.output_size})"

class Network:
    """
    A fully connected feed-forward neural network.

    The shape of the network is described by its topology: the ordered sequence
    of layer sizes, from the input layer to the output layer. A topology of
    [3, 8, 2] describes a network reading 3 inputs, with a hidden layer of 8
    neurons and an output layer of 2 neurons. The input "layer" has no neurons,
    it only fixes the size of the input vector.

    The network can be flattened into a sequence of reals and rebuilt from it,
    which is how a network is encoded in, and decoded from, a Genome. The order
    is: for each layer, for each neuron, the bias followed by the weights.

    Public Attributes:
        layers: The layers of the network, from inputs to outputs

    Public Properties:
        topology: The layer sizes, from inputs to outputs

    Public Methods:
        evaluate(inputs): Propagate inputs through the network
        weights():        Flatten all biases and weights into a single array
        visualize(view):  Render the network with Graphviz

    Class Methods:
        build(rng, topology, weight_range): Create a network with random weights
        from_config(rng, config):           Create a random network described by a Config
        from_weights(topology, weights):    Create a network from flattened weights

    Static Methods:
        weight_count(topology): Number of reals needed to encode a network
    """

    def __init__(self, layers: Sequence[Layer]):
        """
        Parameters:
            layers: The layers of the network, each reading the outputs of the previous one
        """
        layers = list(layers)
        if not layers:
            raise ValueError("A network needs at least one layer")

        for previous, layer in zip(layers, layers[1:]):
            if layer.input_size != previous.output_size:
                raise ValueError(f"Layer expecting {layer.input_size} inputs follows a layer "
                                 f"with {previous.output_size} outputs")

        self.layers: list[Layer] = layers

    @staticmethod
    def _check_topology(topology: Sequence[int]) -> list[int]:
        topology = list(topology)
        if len(topology) < 2:
            raise ValueError(f"Topology needs at least an input and an output layer, got {topology}")
        for size in topology:
            if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size <= 0:
                raise ValueError(f"Layer sizes must be positive integers, got {topology}")
        return [int(size) for size in topology]

    @classmethod
    def build(cls,
              rng         : np.random.Generator,
              topology    : Sequence[int],
              weight_range: float = 1.0) -> 'Network':
        """
        Create a network with biases and weights drawn uniformly from [-weight_range, weight_range].

        Parameters:
            rng:          The random number generator to draw from
            topology:     Layer sizes, from inputs to outputs (at least two)
            weight_range: Half-width of the uniform distribution

        Returns:
            The new Network
        """
        topology = cls._check_topology(topology)
        return cls([Layer.random(rng, input_size, output_size, weight_range)
                    for input_size, output_size in zip(topology, topology[1:])])

    @classmethod
    def from_config(cls, rng: np.random.Generator, config: 'Config') -> 'Network':
        """
        Create a random network with the topology and weight range stored in a Config.

        Parameters:
            rng:    The random number generator to draw from
            config: Stores configuration parameters

        Returns:
            The new Network
        """
        if config.topology is None:
            raise ValueError("Config does not specify a network topology")
        return cls.build(rng, config.topology, config.weight_init_range)

    @classmethod
    def from_weights(cls, topology: Sequence[int], weights: Iterable[float]) -> 'Network':
        """
        Create a network from flattened biases and weights.

        This is the inverse of 'weights()'. For each layer, for each neuron,
        the sequence holds the bias followed by one weight per input.

        Parameters:
            topology: Layer sizes, from inputs to outputs (at least two)
            weights:  Exactly 'weight_count(topology)' reals

        Returns:
            The new Network
        """
        topology = cls._check_topology(topology)
        weights  = np.array(list(weights), dtype=np.float32)

        expected = cls.weight_count(topology)
        if weights.shape[0] != expected:
            raise ValueError(f"Topology {topology} needs {expected} weights, got {weights.shape[0]}")

        layers   = []
        position = 0
        for input_size, output_size in zip(topology, topology[1:]):
            neurons = []
            for _ in range(output_size):
                bias       = weights[position]
                weights_in = weights[position + 1 : position + 1 + input_size]
                neurons.append(Neuron(bias, weights_in))
                position += 1 + input_size
            layers.append(Layer(neurons))

        return cls(layers)

    @staticmethod
    def weight_count(topology: Sequence[int]) -> int:
        """
        Number of reals encoding a network: one bias plus one weight per input, for every neuron.

        Parameters:
            topology: Layer sizes, from inputs to outputs

        Returns:
            The length of the flattened representation
        """
        topology = Network._check_topology(topology)
        return sum((input_size + 1) * output_size for input_size, output_size in zip(topology, topology[1:]))

    @property
    def topology(self) -> list[int]:
        return [self.layers[0].input_size] + [layer.output_size for layer in self.layers]

    def evaluate(self, inputs: Sequence[float]) -> np.ndarray:
        """
        Propagate inputs through all layers of the network.

        Parameters:
            inputs: The network inputs (topology[0] values)

        Returns:
            The network outputs (topology[-1] values, float32 array)
        """
        inputs = np.asarray(inputs, dtype=np.float32)
        if inputs.ndim != 1 or inputs.shape[0] != self.layers[0].input_size:
            raise ValueError(f"Expected {self.layers[0].input_size} inputs, got shape {inputs.shape}")

        for layer in self.layers:
            inputs = layer.evaluate(inputs)
        return inputs

    def weights(self) -> np.ndarray:
        """
        Flatten all biases and weights, in the order understood by 'from_weights'.

        Returns:
            float32 array of 'weight_count(topology)' values
        """
        return np.array([value
                         for layer in self.layers
                         for neuron in layer.neurons
                         for value in (neuron.bias, *neuron.weights)], dtype=np.float32)

    def visualize(self, view: bool = False) -> graphviz.Digraph:
        """
        Visualize the network using Graphviz.

        Neurons are labelled with their bias, connections with their weight.

        Parameters:
            view: If True, automatically open the visualization after rendering

        Returns:
            graphviz.Digraph object representing the network
        """
        dot = graphviz.Digraph()
        dot.attr(rankdir='LR')  # Left to right layout

        node_attrs = {'color': 'black', 'style': 'filled', 'shape': 'circle', 'penwidth': '0.5',
                      'fontsize': '5', 'width': '0.5', 'height': '0.5', 'fixedsize': 'true'}

        with dot.subgraph(name='cluster_0') as cluster:
            cluster.attr(rank='source', label='Inputs', style='invisible')
            for i in range(self.layers[0].input_size):
                cluster.node(f"L0N{i}", label=f"in={i}", fillcolor='lightgrey', **node_attrs)

        for depth, layer in enumerate(self.layers, start=1):
            is_output = depth == len(self.layers)
            with dot.subgraph(name=f"cluster_{depth}") as cluster:
                cluster.attr(rank='sink' if is_output else 'same',
                             label='Outputs' if is_output else f"Hidden {depth}",
                             style='invisible')
                for j, neuron in enumerate(layer.neurons):
                    cluster.node(f"L{depth}N{j}", label=f"bias={neuron.bias:.2f}",
                                 fillcolor='white' if is_output else 'lightblue', **node_attrs)

            for j, neuron in enumerate(layer.neurons):
                for i, weight in enumerate(neuron.weights):
                    dot.edge(f"L{depth - 1}N{i}", f"L{depth}N{j}", label=f"w={weight:.2f}",
                             fontsize='5', penwidth='0.5', arrowsize='0.5')

        if view:
            dot.view(cleanup=True)

        return dot

    def __str__(self):
        lines = []
        for depth, layer in enumerate(self.layers, start=1):
            for j, neuron in enumerate(layer.neurons):
                weights = ", ".join(f"{w:+.2f}" for w in neuron.weights)
                lines.append(f"  [{depth}:{j:02d}] bias={neuron.bias:+.2f}, w=[{weights}]")
        return "\n".join(lines)

    def __repr__(self):
        return f"Network(topology={self.topology})"
