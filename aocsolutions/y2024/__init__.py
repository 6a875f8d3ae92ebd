"""Advent of Code 2024 solutions, one module per day from day01 to day15."""