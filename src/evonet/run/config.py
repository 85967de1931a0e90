import configparser
import os
from loguru import logger

from evonet.operators import crossover_methods, mutation_methods, selection_methods

class Config:

    @staticmethod
    def _parse_method(raw_name, registry, kind):
        """
        Validate a strategy name against its registry.

        Parameters:
            raw_name: The name read from the configuration
            registry: Dictionary mapping valid names to strategy classes
            kind:     Strategy family, used in error messages

        Returns:
            The normalized strategy name
        """
        name = raw_name.strip().lower()
        if name not in registry:
            raise ValueError(f"Invalid {kind} method '{raw_name}', expected one of: {', '.join(registry)}")
        return name

    @staticmethod
    def _parse_topology(raw_topology):
        """
        Parse a network topology from a comma-separated string to a list of layer sizes.

        Parameters:
            raw_topology: Either a comma-separated string ("3, 8, 2") or already a list

        Returns:
            List of positive layer sizes (at least two)
        """
        if raw_topology is None:
            return None

        if isinstance(raw_topology, str):
            try:
                topology = [int(size.strip()) for size in raw_topology.split(',')]
            except ValueError:
                raise ValueError(f"Invalid topology '{raw_topology}': layer sizes must be integers") from None
        else:
            topology = [int(size) for size in raw_topology]

        if len(topology) < 2:
            raise ValueError(f"Topology needs at least an input and an output layer, got {topology}")
        if any(size <= 0 for size in topology):
            raise ValueError(f"Layer sizes must be positive, got {topology}")
        return topology

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a Config holding defaults.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a Config with defaults for manual attribute setting.
        """

        # Default config for testing/manual setup
        if config_file is None:
            self.selection_method = "roulette"
            self.crossover_method = "uniform"

            self.mutation_method      = "gaussian"
            self.mutation_chance      = 0.01
            self.mutation_coefficient = 0.3

            self.topology          = None
            self.weight_init_range = 1.0
            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [SELECTION]

        # How parents are chosen from the population.
        # Allowed values:
        #   "roulette" - fitness-proportionate selection
        self.selection_method = self._parse_method(
            get_value('SELECTION', 'method', str, default="roulette"), selection_methods, "selection")

        # [CROSSOVER]

        # How two parent genomes are combined into a child genome.
        # Allowed values:
        #   "uniform" - each gene taken from either parent with equal probability
        self.crossover_method = self._parse_method(
            get_value('CROSSOVER', 'method', str, default="uniform"), crossover_methods, "crossover")

        # [MUTATION]

        # How a child genome is perturbed.
        # Allowed values:
        #   "gaussian" - each gene shifted by a random signed amount with a fixed probability
        self.mutation_method = self._parse_method(
            get_value('MUTATION', 'method', str, default="gaussian"), mutation_methods, "mutation")

        # The probability that any single gene is mutated, in [0, 1].
        self.mutation_chance = get_value('MUTATION', 'chance', float)

        # The scale of the perturbation applied to a mutated gene.
        # The shift is drawn uniformly from [0, coefficient) with a random sign.
        self.mutation_coefficient = get_value('MUTATION', 'coefficient', float)

        # [NETWORK] (optional section)

        # Layer sizes of the feed-forward network, from inputs to outputs.
        # Use "None" if the evolved genomes do not encode a network.
        self.topology = self._parse_topology(get_value('NETWORK', 'topology', str, default=None))

        # Randomly initialized weights and biases are drawn from
        # [-weight_init_range, weight_init_range].
        self.weight_init_range = get_value('NETWORK', 'weight_init_range', float, default=1.0)

        logger.debug("Loaded configuration from '{}': {}", config_file, self)

    def __setattr__(self, name, value):
        """
        Override 'setattr' to automatically parse the topology when set.
        This allows users to write config.topology = "3, 8, 2" and have it
        automatically converted to the list of layer sizes.
        """
        if name == 'topology':
            value = self._parse_topology(value)
        super().__setattr__(name, value)

    def __repr__(self):
        return (f"Config(selection={self.selection_method!r}, "
                f"crossover={self.crossover_method!r}, "
                f"mutation={self.mutation_method!r}, "
                f"chance={self.mutation_chance}, "
                f"coefficient={self.mutation_coefficient}, "
                f"topology={self.topology})")
