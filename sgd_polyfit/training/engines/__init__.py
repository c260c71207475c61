"""
Training Engines (FINAL)

Pure computation, no I/O except the two persistence engines:

- point_generator_engine : synthetic (x, y) dataset
- hypothesis             : h(x, theta)
- error_metric           : E(theta), RMS(theta)
- sgd_train_engine       : the SGD loop, produces TrainResult
- curve_sampler_engine   : (x, h(x)) grid for plotting
- export_engine          : JSON export (I/O)
- curve_report_engine    : PNG reports (I/O)

Engines raise InvalidConfiguration on unusable inputs BEFORE doing any
work. Numeric divergence is reported, never masked.
"""
