"""Basic validation and testing script for the Dipole Antenna Adjuster."""
import sys
import traceback
from loguru import logger


def run_validation():
    """Run end-to-end validation of all modules."""
    logger.info("Starting Dipole Antenna Adjuster validation")

    validation_results = {
        'imports': False,
        'system_configuration': False,
        'calculator_mode': False,
        'adjuster_mode': False,
        'input_validation': False,
        'band_presets': False,
        'cut_chart': False,
        'overall_success': False
    }

    try:
        # Test 1: Module Imports
        logger.info("Testing module imports...")
        try:
            from calculator import ErrorKind, Action, ValidationError, adjust, calculate
            from core import validate_system_configuration
            from report import format_result, describe_error
            from presets import BandPresets, CABLE_VELOCITY_FACTORS
            from band_chart import BandCutChart, frequency_sweep
            validation_results['imports'] = True
            logger.info("✓ All modules imported successfully")
        except ImportError as e:
            logger.error(f"✗ Import failure: {str(e)}")
            return validation_results

        # Test 2: Environment
        logger.info("Testing system configuration...")
        status = validate_system_configuration()
        for check in status['checks']:
            logger.info(check)
        validation_results['system_configuration'] = status['valid']

        # Test 3: Calculator mode, 20m dipole
        logger.info("Testing calculator mode...")
        try:
            result = calculate("14.150", "0.95")
            assert not isinstance(result, ValidationError)
            assert abs(result.branch_length_m - result.wavelength_m / 4) < 1e-12
            assert abs(result.full_dipole_length_m - result.wavelength_m / 2) < 1e-12
            assert abs(result.wavelength_m - 20.1274) < 1e-3
            for line in format_result(result):
                logger.info(f"  {line}")
            validation_results['calculator_mode'] = True
            logger.info("✓ Calculator mode working")
        except AssertionError as e:
            logger.error(f"✗ Calculator mode test failed: {str(e)}")

        # Test 4: Adjuster mode sign convention
        logger.info("Testing adjuster mode...")
        try:
            too_high = adjust("14.200", "14.150", "0.95")
            too_low = adjust("14.100", "14.150", "0.95")
            assert too_high.difference_m < 0 and too_high.action == Action.LENGTHEN
            assert too_low.difference_m > 0 and too_low.action == Action.SHORTEN
            assert abs(too_high.difference_m + 0.0177) < 1e-4
            validation_results['adjuster_mode'] = True
            logger.info("✓ Adjuster mode working")
        except AssertionError as e:
            logger.error(f"✗ Adjuster mode test failed: {str(e)}")

        # Test 5: Input validation
        logger.info("Testing input validation...")
        try:
            cases = [
                (calculate("", "0.95"), ErrorKind.MISSING_OR_NON_NUMERIC),
                (calculate("0", "0.95"), ErrorKind.NON_POSITIVE_VALUE),
                (calculate("-7.1", "0.95"), ErrorKind.NON_POSITIVE_VALUE),
                (calculate("7.1", "1.0000001"), ErrorKind.VELOCITY_FACTOR_OUT_OF_RANGE),
            ]
            for error, expected in cases:
                assert isinstance(error, ValidationError), f"expected {expected.value}"
                assert error.kind == expected, f"{error.kind.value} != {expected.value}"
                logger.info(f"  rejected: {describe_error(error)}")
            validation_results['input_validation'] = True
            logger.info("✓ Input validation working")
        except AssertionError as e:
            logger.error(f"✗ Input validation test failed: {str(e)}")

        # Test 6: Presets
        logger.info("Testing band presets...")
        try:
            bands = BandPresets.get_all_bands()
            assert len(bands) > 0, "No bands defined"
            assert BandPresets.find_band(14.150).name == '20m'
            assert all(0 < vf <= 1 for vf in CABLE_VELOCITY_FACTORS.values())
            validation_results['band_presets'] = True
            logger.info(f"✓ Band presets working ({len(bands)} bands available)")
        except AssertionError as e:
            logger.error(f"✗ Band presets test failed: {str(e)}")

        # Test 7: Cut chart
        logger.info("Testing cut chart...")
        try:
            chart = BandCutChart(0.95)
            sweep = chart.calculate_sweep(frequency_sweep(14.0, 14.35, 8))
            assert len(sweep['branch_length_m']) == 8
            assert all(sweep['branch_length_m'][:-1] > sweep['branch_length_m'][1:])
            validation_results['cut_chart'] = True
            logger.info("✓ Cut chart working")
        except AssertionError as e:
            logger.error(f"✗ Cut chart test failed: {str(e)}")

        successful_tests = sum(1 for result in validation_results.values() if result is True)
        total_tests = len(validation_results) - 1  # Exclude overall_success

        validation_results['overall_success'] = successful_tests == total_tests

        logger.info(f"Validation complete: {successful_tests}/{total_tests} tests passed")

        return validation_results

    except Exception as e:
        logger.critical(f"Validation script failed: {str(e)}")
        logger.critical(traceback.format_exc())
        return validation_results


def print_validation_report(results):
    """Print formatted validation report."""
    print("\n" + "="*50)
    print("DIPOLE ANTENNA ADJUSTER VALIDATION REPORT")
    print("="*50)

    test_descriptions = {
        'imports': 'Module Imports',
        'system_configuration': 'System Configuration',
        'calculator_mode': 'Calculator Mode',
        'adjuster_mode': 'Adjuster Mode',
        'input_validation': 'Input Validation',
        'band_presets': 'Band Presets',
        'cut_chart': 'Cut Chart'
    }

    for test_key, description in test_descriptions.items():
        status = "✓ PASS" if results[test_key] else "✗ FAIL"
        print(f"{description:<25} {status}")

    print("-"*50)
    overall = "✓ READY" if results['overall_success'] else "✗ ISSUES"
    print(f"Overall Status:           {overall}")

    if results['overall_success']:
        print("\nApplication is ready for use!")
        print("Run: python main.py --help")
    else:
        print("\nIssues found - check log output for details")


def main():
    """Main validation script entry point."""
    try:
        results = run_validation()
        print_validation_report(results)

        sys.exit(0 if results['overall_success'] else 1)

    except KeyboardInterrupt:
        print("\nValidation interrupted by user.")
        sys.exit(0)


if __name__ == "__main__":
    main()
