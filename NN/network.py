# NN/network.py
from __future__ import annotations
from typing import TYPE_CHECKING, Optional, Sequence, get_args

from linalg import ColumnVector, Matrix
from interfaces import NumberGenerator
from NN.init import InitScheme, make_generator, xavier_generator

if TYPE_CHECKING:
    from config import NetworkConfig


class NeuralNetwork:
    """
    Fully connected feedforward network.

    weights[i] is (layer_sizes[i+1] x layer_sizes[i]); activation_values holds
    one preallocated buffer per layer, activation_values[0] being the input.
    A forward pass overwrites the buffers in place and applies no
    nonlinearity between layers (the network is linear).
    """

    def __init__(
        self,
        weights: list[Matrix],
        biases: list[ColumnVector],
        activation_values: list[ColumnVector],
    ):
        self.weights = weights
        self.biases = biases
        self.activation_values = activation_values

    # ---------- Construction ----------
    @classmethod
    def new(
        cls,
        layer_sizes: Sequence[int],
        default_value: Optional[float] = None,
        generator: Optional[NumberGenerator] = None,
        seed: Optional[int] = None,
        scheme: InitScheme = "uniform",
    ) -> "NeuralNetwork":
        """
        layer_sizes like [in, h1, h2, out]

        default_value fills every weight and bias. Without it, elements come
        from `generator`, or from a fresh `scheme` generator seeded with `seed`.
        """
        if len(layer_sizes) < 2:
            raise ValueError("Cannot build a neural network with fewer than two layers.")
        if scheme not in get_args(InitScheme):
            raise ValueError(f"unknown init scheme: {scheme!r}")

        if default_value is None and generator is None and scheme != "xavier":
            generator = make_generator(scheme, seed)

        weights: list[Matrix] = []
        biases: list[ColumnVector] = []
        activation_values = [ColumnVector.new_with_elements(layer_sizes[0], 0.0)]

        for index, (size_in, size_out) in enumerate(zip(layer_sizes, layer_sizes[1:])):
            if default_value is not None:
                weights.append(Matrix.new_with_elements(size_out, size_in, default_value))
                biases.append(ColumnVector.new_with_elements(size_out, default_value))
            else:
                element_gen = generator
                if element_gen is None:
                    layer_seed = None if seed is None else seed + index
                    element_gen = xavier_generator(size_in, size_out, layer_seed)
                weights.append(Matrix.new_with_number_generator(size_out, size_in, element_gen))
                biases.append(ColumnVector.new_with_number_generator(size_out, element_gen))
            activation_values.append(ColumnVector.new_with_elements(size_out, 0.0))

        return cls.from_matrices(weights, biases, activation_values)

    @classmethod
    def from_matrices(
        cls,
        weights: Sequence[Matrix],
        biases: Optional[Sequence[ColumnVector]] = None,
        activation_values: Optional[Sequence[ColumnVector]] = None,
    ) -> "NeuralNetwork":
        """Shapes are not checked here; a mismatch fails in the forward pass."""
        weights = list(weights)
        if biases is None:
            biases = [ColumnVector.new_with_elements(m.rows, 0.0) for m in weights]
        if activation_values is None:
            activation_values = []
            if weights:
                activation_values.append(ColumnVector.new_with_elements(weights[0].columns, 0.0))
            activation_values.extend(ColumnVector.new_with_elements(m.rows, 0.0) for m in weights)
        return cls(weights, list(biases), list(activation_values))

    @classmethod
    def from_config(cls, cfg: "NetworkConfig", generator: Optional[NumberGenerator] = None) -> "NeuralNetwork":
        return cls.new(
            cfg.layer_sizes,
            default_value=cfg.fill_value,
            generator=generator,
            seed=cfg.seed,
            scheme=cfg.init,
        )

    # ---------- Shape ----------
    @property
    def layer_sizes(self) -> list[int]:
        return [len(v) for v in self.activation_values]

    @property
    def input(self) -> ColumnVector:
        return self.activation_values[0]

    @property
    def output(self) -> ColumnVector:
        return self.activation_values[-1]

    def __str__(self):
        desc = ["Neural Network:"]
        for w in self.weights:
            desc.append(f"  Dense({w.columns} → {w.rows})")
        return "\n".join(desc)

    # ---------- Forward ----------
    def forward_pass_one_step(self, layer_index: int) -> None:
        """
        activation_values[i+1] = weights[i] . activation_values[i] + biases[i]

        Writes into the existing buffer of layer i+1; layer i is left as is.
        """
        if not 0 <= layer_index < len(self.weights):
            raise IndexError(f"layer_index {layer_index} out of range for {len(self.weights)} weight matrices")
        current = self.activation_values[layer_index]
        result = self.activation_values[layer_index + 1]
        current.mul_matrix_into(self.weights[layer_index], result)
        result += self.biases[layer_index]

    def calculate_all_activation_values(self, input: ColumnVector) -> ColumnVector:
        """Load `input` into the first buffer and propagate through every layer."""
        if len(input) != len(self.activation_values[0]):
            raise ValueError(f"Expected input of length {len(self.activation_values[0])}, got {len(input)}")
        self.activation_values[0].assign(input)
        for index in range(len(self.weights)):
            self.forward_pass_one_step(index)
        return self.output
