from itertools import product

import numpy as np


def prod_to_array(*iterables):
    return np.array(list(product(*iterables)))
