"""Core utilities - configuration, exceptions, logging"""
