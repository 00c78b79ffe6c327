# tests/test_network.py
import numpy as np
import pytest
from typing import get_type_hints

from linalg import ColumnVector, Matrix
from NN.network import NeuralNetwork
from config import NetworkConfig

def test_identity_weights_pass_input_through(vec):
    weights = [Matrix.identity(5) for _ in range(20)]
    nn = NeuralNetwork.from_matrices(weights)
    x = vec(1, 2, 3, 4, 5)
    nn.calculate_all_activation_values(x)
    assert len(nn.activation_values) == 21
    for values in nn.activation_values:
        assert values == x

@pytest.mark.parametrize("sizes", [[2, 2], [5, 3, 3, 1], [10, 8, 6, 4, 2]])
def test_shape_invariants(network_factory, sizes):
    nn = network_factory(sizes, seed=0)
    assert len(nn.weights) == len(sizes) - 1
    assert len(nn.biases) == len(sizes) - 1
    assert len(nn.activation_values) == len(sizes)
    assert nn.layer_sizes == sizes
    for i, w in enumerate(nn.weights):
        assert w.shape == (sizes[i + 1], sizes[i])
        assert len(nn.biases[i]) == sizes[i + 1]
        assert len(nn.activation_values[i + 1]) == w.rows
        assert len(nn.activation_values[i]) == w.columns

@pytest.mark.parametrize("sizes", [[], [3]])
def test_fewer_than_two_layers_is_rejected(sizes):
    with pytest.raises(ValueError, match="fewer than two layers"):
        NeuralNetwork.new(sizes)

def test_constant_fill(network_factory):
    nn = network_factory((4, 3, 2), default_value=0.25)
    for w, b in zip(nn.weights, nn.biases):
        assert np.all(w.data == np.float32(0.25))
        assert np.all(b.data == np.float32(0.25))
    for a in nn.activation_values:
        assert np.all(a.data == 0)

def test_single_step_updates_next_buffer_only(vec):
    w = Matrix.from_rows([[1, 2], [3, 4], [5, 6]])
    nn = NeuralNetwork.from_matrices([w], biases=[vec(0.5, 0.5, 0.5)])
    nn.activation_values[0].assign(vec(1, 1))
    out_buf = nn.activation_values[1].data

    nn.forward_pass_one_step(0)

    assert nn.activation_values[1].to_list() == [3.5, 7.5, 11.5]
    assert nn.activation_values[0] == vec(1, 1)
    assert nn.activation_values[1].data is out_buf

def test_single_step_index_out_of_range(network_factory):
    nn = network_factory((2, 2), default_value=1.0)
    with pytest.raises(IndexError):
        nn.forward_pass_one_step(1)

def test_full_pass_constant_weights(network_factory, vec):
    nn = network_factory((2, 3, 1), default_value=1.0)
    out = nn.calculate_all_activation_values(vec(1, 2))
    assert nn.activation_values[1].to_list() == [4.0, 4.0, 4.0]
    assert out.to_list() == [13.0]
    assert out is nn.output

def test_full_pass_rejects_wrong_input_length(network_factory, vec):
    nn = network_factory((3, 2), default_value=1.0)
    with pytest.raises(ValueError):
        nn.calculate_all_activation_values(vec(1, 2))

def test_buffers_are_reused_between_passes(network_factory, vec):
    nn = network_factory((2, 3, 2), default_value=0.5)
    buffers = [a.data for a in nn.activation_values]
    nn.calculate_all_activation_values(vec(1, 2))
    nn.calculate_all_activation_values(vec(3, 4))
    assert all(a.data is b for a, b in zip(nn.activation_values, buffers))
    assert nn.input == vec(3, 4)

def test_from_matrices_synthesizes_biases_and_buffers():
    weights = [Matrix.new_with_elements(4, 3, 1.0), Matrix.new_with_elements(2, 4, 1.0)]
    nn = NeuralNetwork.from_matrices(weights)
    assert [len(b) for b in nn.biases] == [4, 2]
    assert nn.layer_sizes == [3, 4, 2]
    assert all(np.all(b.data == 0) for b in nn.biases)

def test_mismatched_bias_fails_in_forward_pass(vec):
    nn = NeuralNetwork.from_matrices([Matrix.identity(2)], biases=[vec(1, 1, 1)])
    with pytest.raises(ValueError):
        nn.calculate_all_activation_values(vec(1, 1))

def test_seeded_construction_is_reproducible(network_factory):
    a = network_factory((4, 3, 2), seed=42)
    b = network_factory((4, 3, 2), seed=42)
    assert all(x == y for x, y in zip(a.weights, b.weights))
    assert all(x == y for x, y in zip(a.biases, b.biases))
    for w in a.weights:
        assert np.all((w.data >= 0) & (w.data <= 1))

def test_injected_generator_is_called_per_element(network_factory):
    calls = []
    def gen(index):
        calls.append(index)
        return -1.0
    nn = network_factory((2, 3), generator=gen)
    # 3x2 weights + 3 biases
    assert len(calls) == 9
    assert np.all(nn.weights[0].data == -1.0)

def test_xavier_scheme_stays_in_bounds(network_factory):
    nn = network_factory((6, 4, 2), seed=1, scheme="xavier")
    for w in nn.weights:
        limit = np.sqrt(6 / (w.rows + w.columns))
        assert np.all(np.abs(w.data) <= limit + 1e-6)

def test_unknown_scheme(network_factory):
    with pytest.raises(ValueError):
        network_factory((2, 2), scheme="lecun")

def test_from_config():
    cfg = NetworkConfig(layer_sizes=(3, 2), fill_value=2.0)
    nn = NeuralNetwork.from_config(cfg)
    assert nn.layer_sizes == [3, 2]
    assert np.all(nn.weights[0].data == 2.0)

def test_str_lists_dense_layers(network_factory):
    nn = network_factory((3, 4, 2), default_value=0.0)
    assert str(nn).splitlines() == ["Neural Network:", "  Dense(3 → 4)", "  Dense(4 → 2)"]

@pytest.mark.parametrize("kwargs", [{"default_value": 1.0}, {"generator": lambda i: 0.0}])
def test_unknown_scheme_rejected_even_when_unused(network_factory, kwargs):
    with pytest.raises(ValueError, match="unknown init scheme"):
        network_factory((2, 2), scheme="bogus", **kwargs)

def test_from_config_is_annotated_with_network_config():
    hints = get_type_hints(NeuralNetwork.from_config, localns={"NetworkConfig": NetworkConfig})
    assert hints["cfg"] is NetworkConfig
