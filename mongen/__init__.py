"""mongen -- Mongoose model and Express REST scaffolding from the command line."""

__version__ = "1.0.0"
