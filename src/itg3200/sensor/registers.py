"""ITG-3200 register map and the fixed bus settings used to reach it."""

# Adapter and peripheral
BUS_PATH = "/dev/i2c-1"
GYRO_ADDRESS = 0x68  # AD0 pulled low

# Register addresses
WHO_AM_I = 0x00
SMPLRT_DIV = 0x15
DLPF_FS = 0x16     # Full-scale range and digital low pass filter
INT_CFG = 0x17
INT_STATUS = 0x1A
TEMP_OUT_H = 0x1B
TEMP_OUT_L = 0x1C
GYRO_XOUT_H = 0x1D  # First of six consecutive data registers
GYRO_XOUT_L = 0x1E
GYRO_YOUT_H = 0x1F
GYRO_YOUT_L = 0x20
GYRO_ZOUT_H = 0x21
GYRO_ZOUT_L = 0x22
PWR_MGM = 0x3E     # Power management

REGISTER_SPACE = PWR_MGM + 1

# Configuration values
PWR_MGM_CLK_PLL_X = 0x01  # Clock from PLL with X gyro reference
DLPF_FS_2000DPS = 0x18    # FS_SEL=3 (+/-2000 deg/s), DLPF 256 Hz

# Writes issued before sampling, in order: (register, value)
CONFIG_SEQUENCE: tuple[tuple[int, int], ...] = (
    (PWR_MGM, PWR_MGM_CLK_PLL_X),
    (DLPF_FS, DLPF_FS_2000DPS),
)

SAMPLE_SIZE = 6  # X, Y, Z high/low byte pairs
SETTLE_SECONDS = 1.0
