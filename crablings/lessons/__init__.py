"""Worked solutions to the course exercises, grouped by topic."""