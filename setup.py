#!/usr/bin/env python3
import os

from setuptools import setup


install_requires = [
    'click',
    'flask',
    'prometheus-client',
    'schedule'
]

setup(name='workload-estimator',
      description='Estimate the resources future runs of a workload group will need',
      version=os.getenv("WORKLOAD_ESTIMATOR_VERSION", "0.0.dev0"),
      install_requires=install_requires,
      extras_require={
          'test': ['pytest']
      },
      packages=[
          "workload_estimator",
          "workload_estimator.api",
          "workload_estimator.config",
          "workload_estimator.estimate",
          "workload_estimator.gc",
          "workload_estimator.metrics",
          "workload_estimator.model"])
