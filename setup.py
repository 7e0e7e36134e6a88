from setuptools import setup, find_packages


setup(name='kindr',
      version='1.0.0',
      description='Kinematics and dynamics for robotics: rotations, rotation differentials, angular velocities and '
                  'physically typed vectors',
      packages=find_packages(include=['kindr', 'kindr.*']),
      python_requires='>=3.11',
      install_requires=['numpy'],
      extras_require={'test': ['pytest']})
