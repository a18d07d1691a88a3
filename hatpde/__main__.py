"""
hatpde module interface.

Usage:
    hatpde test [--report]
    hatpde bench
    hatpde cov
    hatpde get_config
    hatpde energy [--samples=<samples>] [--stop_time=<stop_time>] [--plot=<plot_path>]

Options:
    --samples=<samples>      comma-separated sample counts [default: 10,20,40,80,160]
    --stop_time=<stop_time>  simulated time [default: 100]
    --plot=<plot_path>       optional path for an energy plot [default: None]
"""

if __name__ == "__main__":

    import sys
    import pathlib
    import shutil
    from docopt import docopt
    from hatpde.tools import logging
    from hatpde.tests import test, bench, cov

    args = docopt(__doc__)
    if args['test']:
        sys.exit(test(report=args['--report']))
    elif args['bench']:
        sys.exit(bench())
    elif args['cov']:
        sys.exit(cov())
    elif args['get_config']:
        config_path = pathlib.Path(__file__).parent.joinpath('hatpde.cfg')
        shutil.copy(str(config_path), '.')
    elif args['energy']:
        from hatpde.extras import energy_tools
        ns = [int(n) for n in args['--samples'].split(',')]
        stop_time = float(args['--stop_time'])
        results = energy_tools.convergence_study(ns, t2=stop_time)
        plot_path = args['--plot']
        if plot_path != 'None':
            from hatpde.extras import plot_tools
            axes = plot_tools.plot_energy(results)
            axes.figure.savefig(plot_path)
