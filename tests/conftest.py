"""
Pytest configuration and fixtures for all tests.

Provides shared setup/teardown and fixtures for logging and Go sources.

License: MIT
"""

import pytest

from mockgen_core.logging_service import LoggingService

VEHICLE_SOURCE = """package example

import (
	"io"
	"os"
	osfs "os"

	"github.com/jamesrr39/go-mockgen-tool/example/extrapkg"
)

type DriveMode int

const (
	DriveModeFast DriveMode = iota
)

//go:generate go-mockgen-tool --type Vehicle
type Vehicle interface {
	Name() string
	WheelCount() (int, error)
	test2(mode, mode2 DriveMode) func(cargoWeightKg float64) (float64, error)
	GetReader() io.Reader
	// DoSomething is a no-return function
	DoSomething()
	DoSomething2(err1, err2 extrapkg.Error, a int)
	DoSomething3(extrapkg.Error, int, func(a, b string) extrapkg.Error)
	io.Writer
	// SecondInterface is an interface in the same package
	SecondInterface
	osfs.Signal
}

type SecondInterface interface {
	os.FileInfo
	io.WriteCloser
}
"""


@pytest.fixture(autouse=True)
def reset_logging_service():
    """Reset LoggingService state before each test."""
    LoggingService.reset()

    # Configure for tests
    LoggingService.configure_logging(level="DEBUG", format="json")

    yield

    # Cleanup after test
    LoggingService.reset()


@pytest.fixture
def vehicle_source() -> str:
    """Go source declaring the Vehicle interface and its helpers."""
    return VEHICLE_SOURCE
