"""Time & Leave package.

Organized by feature modules (attendance, leave, timer, ...) with a thin Flask
controller layer over service/repository layers. All state lives in memory.
"""
