"""
The VIEW layer: Qt widgets and QPainter drawing of the volcano plot.
"""
