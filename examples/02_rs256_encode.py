from gfecc.field.registry import Config as FieldConfig
from gfecc.rs.encoder import Config, encode

# QR version 1-M data codewords
DATA = [0x10, 0x20, 0x0C, 0x56, 0x61, 0x80, 0xEC, 0x11, 0xEC, 0x11, 0xEC, 0x11, 0xEC, 0x11, 0xEC, 0x11]


if __name__ == "__main__":
    cfg = Config(field=FieldConfig(module="binary"), nsym=10)
    codeword = encode(DATA, cfg=cfg)

    print("Data:   " + " ".join(f"{v:02X}" for v in codeword[:len(DATA)]))
    print("Parity: " + " ".join(f"{v:02X}" for v in codeword[len(DATA):]))
