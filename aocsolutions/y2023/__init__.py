"""Advent of Code 2023 solutions: the day 1 calibration puzzle."""