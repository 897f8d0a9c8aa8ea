"""Worked examples of each kata's idea as plain functions."""