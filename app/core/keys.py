from ecdsa import SigningKey, SECP256k1

### INIT
curve = SECP256k1


### CLASSES
class Keypair:
  """custodial keypair, hex encoded"""
  def __init__(self, publicKey: str, privateKey: str):
    self.publicKey = publicKey
    self.privateKey = privateKey

  def __repr__(self):
    return f'Keypair(publicKey={self.publicKey})'

  @classmethod
  def fromSk(cls, sk: SigningKey):
    pk = sk.get_verifying_key().to_string('compressed')
    return cls(publicKey=pk.hex(), privateKey=sk.to_string().hex())

  @classmethod
  def fromHex(cls, privateKey: str):
    return cls.fromSk(SigningKey.from_string(bytes.fromhex(privateKey), curve=curve))


### FUNCTIONS
def generate_keypair() -> Keypair:
  return Keypair.fromSk(SigningKey.generate(curve=curve))
