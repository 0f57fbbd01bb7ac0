"""
iris_mlp
--------
A 4 -> 3 -> 3 sigmoid network in plain NumPy for Iris species classification,
with hand-written forward propagation, backpropagation and gradient descent.
"""
from iris_mlp.activations import sigmoid, sigmoid_prime
from iris_mlp.network import (
    ForwardCache,
    Gradients,
    Parameters,
    ShapeMismatchError,
    backward,
    broadcast_bias,
    constant_init,
    cost,
    forward,
    uniform_init,
)
from iris_mlp.prediction import UNCLASSIFIED, accuracy, classify_outputs, predict, predict_proba
from iris_mlp.training import sgd_step, train

__all__ = [
    "sigmoid", "sigmoid_prime",
    "ForwardCache", "Gradients", "Parameters", "ShapeMismatchError",
    "backward", "broadcast_bias", "constant_init", "cost", "forward", "uniform_init",
    "UNCLASSIFIED", "accuracy", "classify_outputs", "predict", "predict_proba",
    "sgd_step", "train",
]
