# catr/core/__init__.py
# Pure core layer: numbering state machine, exceptions & output registry
