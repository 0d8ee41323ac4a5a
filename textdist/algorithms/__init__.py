"""Distance and similarity algorithms, one class per module."""