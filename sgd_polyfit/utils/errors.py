# sgd_polyfit/utils/errors.py
class InvalidConfiguration(RuntimeError):
    """
    Raised when a training run is requested with unusable inputs
    (empty dataset, negative degree, non-positive learning rate,
    negative iteration count).
    Raised before any computation starts. Should NOT print traceback.
    """
