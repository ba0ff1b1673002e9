"""The exercises' ideas written as plain Python functions."""