from mcoptions.utils.decorators.timing import timeit

__all__ = ["timeit"]
