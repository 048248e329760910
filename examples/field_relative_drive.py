#!/usr/bin/env python

import argparse
import logging

import numpy as np

from skdrive.geometry import Rotation2d
from skdrive.geometry import Translation2d
from skdrive.kinematics import DifferentialDriveKinematics
from skdrive.kinematics import FieldRelativeSpeeds
from skdrive.kinematics import MecanumDriveKinematics


def main():
    parser = argparse.ArgumentParser(
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        description='Convert a field-relative command into wheel speeds'
    )
    parser.add_argument('--vx', type=float, default=1.0,
                        help='field x velocity [m/s]')
    parser.add_argument('--vy', type=float, default=0.0,
                        help='field y velocity [m/s]')
    parser.add_argument('--vtheta', type=float, default=0.0,
                        help='angular velocity [rad/s]')
    parser.add_argument('--heading', type=float, default=90.0,
                        help='robot heading [deg], counter-clockwise')
    parser.add_argument('--drive-radius', type=float, default=0.3,
                        help='half of the differential drive track width [m]')
    parser.add_argument('--max-speed', type=float, default=3.0,
                        help='attainable max wheel speed [m/s]')
    parser.add_argument(
        '--no-interactive',
        action='store_true',
        help="Run in non-interactive mode (do not wait for user input)"
    )
    parser.add_argument('--verbose', action='store_true',
                        help='enable debug logging')
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO)

    command = FieldRelativeSpeeds(args.vx, args.vy, args.vtheta)
    show(command, args.heading, args)

    if args.no_interactive:
        return
    while True:
        line = input("heading [deg] (empty to exit): ").strip()
        if not line:
            break
        show(command, float(line), args)


def show(command, heading_degrees, args):
    heading = Rotation2d.from_degrees(heading_degrees)
    speeds = command.to_robot_relative(heading)
    print('robot relative: dx={:.3f} dy={:.3f} dtheta={:.3f}'.format(
        speeds.dx, speeds.dy, speeds.dtheta))

    differential = DifferentialDriveKinematics(args.drive_radius)
    wheel_speeds = differential.to_wheel_speeds(speeds).normalize(
        args.max_speed)
    print('differential: left={:.3f} right={:.3f}'.format(
        wheel_speeds.left, wheel_speeds.right))

    mecanum = MecanumDriveKinematics(
        Translation2d(0.3, 0.3), Translation2d(0.3, -0.3),
        Translation2d(-0.3, 0.3), Translation2d(-0.3, -0.3))
    wheel_speeds = mecanum.to_wheel_speeds(speeds).normalize(args.max_speed)
    print('mecanum: {}'.format(np.round(wheel_speeds.as_array(), 3)))


if __name__ == '__main__':
    main()
