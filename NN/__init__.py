from NN.network import NeuralNetwork
from NN.loss import mean_square_error

__all__ = ["NeuralNetwork", "mean_square_error"]
