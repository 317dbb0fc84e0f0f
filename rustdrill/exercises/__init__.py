"""Worked solutions to the course topics, written as plain Python."""