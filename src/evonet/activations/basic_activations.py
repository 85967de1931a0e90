import numpy as np

def relu_activation(z):
    return np.maximum(0.0, z)
